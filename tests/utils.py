from user_service.runtime.settings import Settings


def make_settings(**overrides) -> Settings:
    """Test settings that ignore the developer's environment and ``.env``."""
    values = {
        "environment": "test",
        "log_level": "WARNING",
        "repository_backend": "memory",
        "database_url": "sqlite://",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
