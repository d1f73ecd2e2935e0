"""회원 검색 Pydantic 요청/응답 스키마 정의.

Member search Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from app.utils.pagination import Page


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 모든 필드는 선택 사항.

    Member search condition. Every field is optional; a missing or blank
    field adds no predicate to the query.

    Attributes:
        username: 회원 이름 일치 (Exact username match)
        team_name: 팀 이름 일치 (Exact team name match)
        age_goe: 최소 나이, 이상 (Minimum age, inclusive)
        age_loe: 최대 나이, 이하 (Maximum age, inclusive)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None

    @field_validator("username", "team_name")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        # 공백 문자열은 조건 없음으로 취급 — Blank text means "no filter"
        if value is None or not value.strip():
            return None
        return value


class MemberTeamResponse(BaseModel):
    """회원+팀 프로젝션 응답 스키마.

    Flattened member/team projection. team_id and team_name are None for
    members without a team.
    """

    model_config = ConfigDict(from_attributes=True)

    member_id: int
    username: str
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberTeamPage(Page):
    """회원+팀 페이지 응답 — Page of MemberTeamResponse items."""

    content: list[MemberTeamResponse]
