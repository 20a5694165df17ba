# wipe_db.py
from sqlalchemy import create_engine

from bot.db import SYNC_DATABASE_URL
from db.models import Base


def wipe() -> None:
    engine = create_engine(SYNC_DATABASE_URL)
    with engine.begin() as conn:
        Base.metadata.drop_all(bind=conn)
        Base.metadata.create_all(bind=conn)


if __name__ == "__main__":
    wipe()
    print("✅ DATABASE DROPPED AND RECREATED")
