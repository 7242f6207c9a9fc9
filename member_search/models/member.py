from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from member_search.core.database import Base


class Member(Base):
    """회원 모델"""

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    username: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    age: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("teams.id"),
        nullable=True,
    )

    # 관계
    team: Mapped[Optional["Team"]] = relationship("Team", back_populates="members")

    def __init__(
        self,
        username: str | None = None,
        age: int = 0,
        team: "Team | None" = None,
        **kwargs,
    ):
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: "Team") -> None:
        """팀 변경 (back_populates로 team.members도 함께 갱신)"""
        self.team = team

    def __repr__(self) -> str:
        return f"<Member id={self.id} username={self.username} age={self.age}>"


# 순환 import 방지
from member_search.models.team import Team  # noqa: E402
