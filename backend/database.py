# backend/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

from config import settings

load_dotenv()

# 1. Database URL from the environment / .env (SQLite file by default)
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# 2. Hosted Postgres providers hand out postgres://, SQLAlchemy wants postgresql://
if SQLALCHEMY_DATABASE_URL and SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

# 3. Engine options depending on the backend
engine_kwargs = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # In-memory SQLite lives only as long as its connection, so share one
    if SQLALCHEMY_DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # Import models so every table is registered on Base.metadata
    import models.users  # noqa: F401
    import models.product  # noqa: F401
    import models.sale  # noqa: F401
    import models.purchase  # noqa: F401
    import models.seller  # noqa: F401
    import models.log  # noqa: F401
    Base.metadata.create_all(bind=engine)
