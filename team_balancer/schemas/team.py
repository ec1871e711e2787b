"""Team Schemas: response models for the team endpoints."""

from pydantic import BaseModel


class TeamResponse(BaseModel):
    id: str
    name: str


class TeamWithCountResponse(BaseModel):
    id: str
    name: str
    active_member_count: int


class TeamSplitResponse(BaseModel):
    original_team_id: str
    new_team: TeamResponse
    moved_participant_ids: list[str]
