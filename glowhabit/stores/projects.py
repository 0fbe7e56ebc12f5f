"""Project and deep-work session stores."""

from datetime import datetime
from typing import Any, Iterable, Optional

from glowhabit.models.project import PROJECT_COLORS, PROJECT_ICONS, DeepWorkSession, Project
from glowhabit.stores.base import GetItem, dump_records, load_records


class ProjectStore:
    """Projects plus the deep-work sessions logged against them."""

    STORAGE_KEY = "glowhabit-projects"
    SESSIONS_KEY = "glowhabit-deepwork-sessions"

    def __init__(self, projects: Iterable[Project] = (), sessions: Iterable[DeepWorkSession] = ()):
        self._projects: dict[str, Project] = {p.id: p for p in projects}
        self._sessions: dict[str, DeepWorkSession] = {
            s.id: s for s in sessions if s.project_id in self._projects
        }

    def projects(self, active_only: bool = False) -> list[Project]:
        ordered = sorted(self._projects.values(), key=lambda p: (p.created_at, p.id))
        return [p for p in ordered if p.is_active] if active_only else ordered

    def get(self, project_id: str) -> Optional[Project]:
        return self._projects.get(project_id)

    def _require(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise KeyError(f"Unknown project: {project_id}")
        return project

    def add_project(self, name: str, **fields: Any) -> Project:
        """Create an active project. Color and icon cycle through the palettes."""
        count = len(self._projects)
        fields.setdefault("color", PROJECT_COLORS[count % len(PROJECT_COLORS)])
        fields.setdefault("icon", PROJECT_ICONS[count % len(PROJECT_ICONS)])
        project = Project(name=name, **fields)
        self._projects[project.id] = project
        return project

    def update_project(self, project_id: str, **updates: Any) -> Project:
        project = self._require(project_id)
        updated = Project.model_validate({**project.model_dump(), **updates})
        self._projects[project_id] = updated
        return updated

    def remove_project(self, project_id: str) -> None:
        """Delete a project together with its sessions."""
        self._require(project_id)
        del self._projects[project_id]
        self._sessions = {k: s for k, s in self._sessions.items() if s.project_id != project_id}

    def add_session(
        self,
        project_id: str,
        duration: int,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> DeepWorkSession:
        """Log a finished session; its day is the day it was completed."""
        self._require(project_id)
        now = now or datetime.now()
        session = DeepWorkSession(
            project_id=project_id,
            duration=duration,
            completed_at=now,
            notes=notes,
            date=now.date(),
        )
        self._sessions[session.id] = session
        return session

    def sessions(self, project_id: Optional[str] = None) -> list[DeepWorkSession]:
        """Sessions in completion order, optionally for a single project."""
        records = [s for s in self._sessions.values() if project_id is None or s.project_id == project_id]
        return sorted(records, key=lambda s: (s.completed_at, s.id))

    @classmethod
    def load(cls, get_item: GetItem) -> "ProjectStore":
        return cls(
            load_records(get_item(cls.STORAGE_KEY), Project, cls.STORAGE_KEY),
            load_records(get_item(cls.SESSIONS_KEY), DeepWorkSession, cls.SESSIONS_KEY),
        )

    def dump(self) -> dict[str, str]:
        return {
            self.STORAGE_KEY: dump_records(self.projects()),
            self.SESSIONS_KEY: dump_records(self.sessions()),
        }
