from member_search.models.member import Member
from member_search.models.team import Team

__all__ = [
    "Member",
    "Team",
]
