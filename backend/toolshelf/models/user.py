#Define table columns and types.
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Table, UniqueConstraint
#Provides database functions for timestamps
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base

#Favorites association: one row per (user, tool).
#The surrogate id keeps insertion order, the unique constraint keeps the set duplicate-free.
user_favorite_tools = Table(
    "user_favorite_tools",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("tool_id", Integer, ForeignKey("tools.id", ondelete="CASCADE"), nullable=False),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    UniqueConstraint("user_id", "tool_id", name="uq_user_favorite_tool"),
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
    is_super_admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    favorite_tools = relationship(
        "Tool",
        secondary=user_favorite_tools,
        order_by=user_favorite_tools.c.id,
    )
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")

    @property
    def favorite_tool_ids(self):
        return [tool.id for tool in self.favorite_tools]

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"
