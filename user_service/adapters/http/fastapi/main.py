# uvicorn user_service.adapters.http.fastapi.main:app --reload
# http://127.0.0.1:8000/docs
from user_service.adapters.http.fastapi.api import create_app

app = create_app()
