from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from contacts_api.core.config import settings

url = make_url(settings.DATABASE_URL)
backend = url.get_backend_name()

connect_args = {}
engine_kwargs = {"pool_pre_ping": True}
if backend.startswith("postgresql"):
    options = "-c timezone=utc"
    if settings.DB_STATEMENT_TIMEOUT_MS > 0:
        options += f" -c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
    connect_args["options"] = options
elif backend == "sqlite":
    connect_args["check_same_thread"] = False
    if url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty database
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
