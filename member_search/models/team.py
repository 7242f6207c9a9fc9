from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from member_search.core.database import Base


class Team(Base):
    """팀 모델"""

    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    # 관계 (연관관계의 주인은 Member.team)
    members: Mapped[list["Member"]] = relationship(
        "Member",
        back_populates="team",
    )

    def __init__(self, name: str, **kwargs):
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"<Team id={self.id} name={self.name}>"


# 순환 import 방지
from member_search.models.member import Member  # noqa: E402
