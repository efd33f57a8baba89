"""Task service - Business logic for task operations.

Every operation reloads the full collection from the repository, works on
the in-memory list and, if anything changed, writes the whole list back.
"""

from __future__ import annotations

from taskman_cli.adapters import JsonTaskStore
from taskman_cli.config import AppConfig
from taskman_cli.exceptions import TaskNotFoundError
from taskman_cli.models import Task
from taskman_cli.repositories import TaskRepository
from taskman_cli.utils.fuzzy import fuzzy_match
from taskman_cli.utils.logger import get_logger


def next_task_id(tasks: list[Task]) -> int:
    """Return the id for a new task: one past the largest id in use."""
    return max((task.id for task in tasks), default=0) + 1


def find_task_index(tasks: list[Task], task_id: int) -> int:
    """Return the position of the first task with *task_id*.

    Raises:
        TaskNotFoundError: If no task has that id
    """
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise TaskNotFoundError(task_id)


class TaskService:
    """Service for task business logic.

    The repository is handed in explicitly so commands and tests decide
    which storage the service works against.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository
        self.logger = get_logger()

    def list_tasks(self) -> list[Task]:
        """List all tasks in storage order."""
        return self.repository.load()

    def add_task(self, description: str) -> Task:
        """Create a new pending task.

        Args:
            description: Task text

        Returns:
            Created Task object
        """
        tasks = self.repository.load()
        task = Task(id=next_task_id(tasks), description=description)
        tasks.append(task)
        self.repository.save(tasks)
        self.logger.info("added task %d", task.id)
        return task

    def remove_task(self, task_id: int) -> Task:
        """Delete a task.

        Remaining tasks keep their ids.

        Returns:
            The removed Task

        Raises:
            TaskNotFoundError: If no task has that id
        """
        tasks = self.repository.load()
        task = tasks.pop(find_task_index(tasks, task_id))
        self.repository.save(tasks)
        self.logger.info("removed task %d", task_id)
        return task

    def edit_task(self, task_id: int, description: str) -> Task:
        """Replace a task's description, leaving id and completion alone.

        Raises:
            TaskNotFoundError: If no task has that id
        """
        tasks = self.repository.load()
        task = tasks[find_task_index(tasks, task_id)]
        task.description = description
        self.repository.save(tasks)
        self.logger.info("edited task %d", task_id)
        return task

    def toggle_task(self, task_id: int) -> Task:
        """Flip a task between pending and completed.

        Raises:
            TaskNotFoundError: If no task has that id
        """
        tasks = self.repository.load()
        task = tasks[find_task_index(tasks, task_id)]
        task.completed = not task.completed
        self.repository.save(tasks)
        self.logger.info("toggled task %d to %s", task_id, task.status)
        return task

    def search_tasks(self, query: str) -> list[Task]:
        """Fuzzy-search tasks by id, description and status word.

        Any task the query matches is returned, however low its score, and
        results keep storage order.
        """
        matches = [
            task
            for task in self.repository.load()
            if fuzzy_match(task.search_text, query) is not None
        ]
        self.logger.debug("search %r matched %d task(s)", query, len(matches))
        return matches


def get_task_service(config: AppConfig | None = None) -> TaskService:
    """Build a TaskService backed by the JSON task file from *config*."""
    config = config or AppConfig()
    return TaskService(JsonTaskStore(config.task_file, indent=config.indent))
