from .task_edit import TaskEditController
from .task_list import TaskListController

__all__ = ["TaskEditController", "TaskListController"]
