# helpdesk/infrastructure/database/base_model.py

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# sqlite only autoincrements INTEGER PRIMARY KEY
BigIntId = BigInteger().with_variant(Integer, "sqlite")


class BaseModel(DeclarativeBase):
    pass
