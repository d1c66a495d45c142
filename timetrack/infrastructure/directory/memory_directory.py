"""
In-process directory used in development and tests.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Union

from timetrack.domain.collaborators import TaskDirectory, TaskRef, UserDirectory
from timetrack.domain.models.user import UserRole


logger = logging.getLogger(__name__)


class InMemoryDirectory(TaskDirectory, UserDirectory):
    """Tasks, assignments and roles held in dictionaries."""

    def __init__(self):
        self._tasks: Dict[str, TaskRef] = {}
        self._assignees: Dict[str, Set[str]] = {}
        self._roles: Dict[str, UserRole] = {}

    def add_task(
        self,
        task_id: str,
        project_id: str,
        title: Optional[str] = None,
        assignees: Iterable[str] = (),
    ) -> TaskRef:
        task = TaskRef(task_id=task_id, project_id=project_id, title=title)
        self._tasks[task_id] = task
        self._assignees.setdefault(task_id, set()).update(assignees)
        return task

    def assign(self, user_id: str, task_id: str) -> None:
        self._assignees.setdefault(task_id, set()).add(user_id)

    def set_role(self, user_id: str, role: Union[UserRole, str]) -> None:
        self._roles[user_id] = UserRole(role)

    def get_task(self, task_id: str) -> Optional[TaskRef]:
        return self._tasks.get(task_id)

    def is_assigned(self, user_id: str, task_id: str) -> bool:
        return user_id in self._assignees.get(task_id, set())

    def get_user_role(self, user_id: str) -> Optional[UserRole]:
        return self._roles.get(user_id)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryDirectory":
        """
        Load a seed file shaped like:
            {"users": {"u1": "team_member"},
             "tasks": [{"id": "t1", "projectId": "p1", "title": "...", "assignees": ["u1"]}]}
        """
        directory = cls()
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

        for user_id, role in data.get("users", {}).items():
            directory.set_role(user_id, role)
        for task in data.get("tasks", []):
            directory.add_task(
                task_id=str(task["id"]),
                project_id=str(task["projectId"]),
                title=task.get("title"),
                assignees=[str(a) for a in task.get("assignees", [])],
            )

        logger.info(
            f"Loaded directory seed {path}: {len(directory._roles)} user(s), "
            f"{len(directory._tasks)} task(s)"
        )
        return directory
