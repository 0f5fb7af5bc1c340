from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from board.database import Base

# Signed 64-bit range of the id column.
MIN_POST_ID = -(2**63)
MAX_POST_ID = 2**63 - 1


class Post(Base):
    __tablename__ = "posts"

    # SQLite only auto-assigns rowids for a column declared exactly INTEGER.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Post(id={self.id!r}, title={self.title!r})"
