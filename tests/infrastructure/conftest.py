"""SQL adapter fixtures: seeding helpers over the in-memory test database."""

import pytest

from team_balancer.core.domain_types import ParticipantStatus
from team_balancer.models.participant import ParticipantRow
from team_balancer.models.team import TeamRow


@pytest.fixture
def seed(test_db):
    """Insert teams and participants directly, bypassing the adapters."""

    class _Seeder:
        async def team(self, team_id: str, name: str) -> None:
            test_db.add(TeamRow(id=team_id, name=name))
            await test_db.commit()

        async def participant(
            self, pid: str, name: str, team_id: str | None,
            status: ParticipantStatus = ParticipantStatus.ACTIVE,
        ) -> None:
            test_db.add(ParticipantRow(
                id=pid, name=name, team_id=team_id, status=status.value,
            ))
            await test_db.commit()

        async def members(self, team_id: str, count: int, start: int = 0) -> list[str]:
            ids = []
            for i in range(start, start + count):
                pid = f"00000000-0000-4000-8000-{i:012d}"
                test_db.add(ParticipantRow(
                    id=pid, name=f"Member {i:02d}", team_id=team_id,
                    status=ParticipantStatus.ACTIVE.value,
                ))
                ids.append(pid)
            await test_db.commit()
            return ids

    return _Seeder()
