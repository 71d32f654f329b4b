from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from qazaq.core.config import settings


def build_engine(url: str, **kwargs):
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        # FastAPI may hand a session to a different worker thread than the one that opened it
        connect_args.setdefault("check_same_thread", False)
    engine = create_engine(url, connect_args=connect_args, **kwargs)

    if url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
