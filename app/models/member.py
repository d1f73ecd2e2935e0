"""회원/팀 SQLAlchemy ORM 모델 정의.

Member and team SQLAlchemy ORM model definitions.
A team groups many members; a member belongs to at most one team.

Tables:
    - team: 팀 (Member group)
    - member: 회원 (Member, optionally linked to a team)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델.

    Team model — named group of members.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of this team)
    """

    __tablename__ = "team"

    # 팀 고유 식별자 — Team identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 팀 이름 — Team display name
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    members = relationship("Member", back_populates="team")

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name!r})"


class Member(Base):
    """회원 모델.

    Member model — username, age and optional team membership.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        username: 회원 이름 (Member username)
        age: 나이 (Age in years)
        team_id: 소속 팀 FK, 없을 수 있음 (Optional team foreign key)

    Relationships:
        team: 소속 팀 (Parent team, may be None)
    """

    __tablename__ = "member"

    # 회원 고유 식별자 — Member identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — Username (not unique)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    # 나이 — Age
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — Team (SET NULL: 팀 삭제 시 회원은 팀 없이 남음)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("team.id", ondelete="SET NULL"), nullable=True, index=True
    )

    team = relationship("Team", back_populates="members")

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
