import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agrishield.api.rest_routes.chat import router as chat_router
from agrishield.core.config import settings
from agrishield.core.log_config import configure_logging

load_dotenv()
configure_logging()

app = FastAPI(title="AgriShield AI")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the AgriShield AI Farming Assistant!"}


def run() -> None:
    uvicorn.run("agrishield.main:app", host=settings.HOST, port=settings.PORT)
