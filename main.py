import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from db import Base, engine
import navigator.models  # noqa: F401  (registers tables on Base.metadata)
from navigator.logic.knowledge_base import default_knowledge_base
from navigator.routes import router as navigator_router
from profile_routes import router as profile_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logging.info(f"App starting with {engine.dialect.name} database")

app = FastAPI(title="Visa Navigator API")

_origins = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

# Validate the catalog once at startup; problems are logged by the loader
kb = default_knowledge_base()
if kb.problems:
    logging.warning(f"Visa knowledge base loaded with {len(kb.problems)} integrity problem(s)")

app.include_router(navigator_router)
app.include_router(profile_router)


@app.get("/", tags=["meta"])
def root():
    return {"status": "ok", "service": "visa-navigator"}
