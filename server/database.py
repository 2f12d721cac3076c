from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from server.config import config
from alert_worker.models import Base  # noqa: F401  (tables live with the worker models)

# =========================================================
# DATABASE SETUP
# =========================================================
def make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # The scheduler thread shares the engine with request handlers
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)

def make_session_factory(bind):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)

engine = make_engine(config.DATABASE_URL)
SessionLocal = make_session_factory(engine)
