"""Priority queues, hierarchies, trees, networks and a complexity analyzer."""

__version__ = "0.1.0"

__all__ = [
    "adt",
    "analyzer",
    "hierarchy",
    "list_analyzer",
    "network",
    "priority_queue",
    "tree",
]