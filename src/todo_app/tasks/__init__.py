from .task_models import Task
from .task_store import TaskStore, locate_storage_path

__all__ = ["Task", "TaskStore", "locate_storage_path"]
