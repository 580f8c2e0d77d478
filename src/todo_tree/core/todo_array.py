"""A sequence of todos kept sorted by comparison priority."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from todo_tree.models.todo import Todo


@dataclass
class TodoArray:
    """Todos in non-decreasing comparison priority order.

    ``push`` does not check the order; callers either append in final position
    or call ``reorder`` on the new index afterwards.
    """

    todos: list[Todo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.todos)

    def __bool__(self) -> bool:
        return bool(self.todos)

    def __getitem__(self, index: int) -> Todo:
        return self.todos[index]

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.todos)

    def push(self, todo: Todo) -> None:
        self.todos.append(todo)

    def remove(self, index: int) -> Todo:
        return self.todos.pop(index)

    def sort(self) -> None:
        """Full stable sort; for bulk normalization only."""
        self.todos.sort(key=Todo.comparison_priority)

    def display(self) -> list[str]:
        return [todo.display() for todo in self.todos]

    def move_index(self, from_index: int, to_index: int) -> int:
        """Move the todo at from_index to to_index by adjacent swaps.

        Everything in between shifts by one place and keeps its relative order.

        Returns:
            The index the todo landed on.
        """
        todos = self.todos
        if from_index < to_index:
            for i in range(from_index, to_index):
                todos[i], todos[i + 1] = todos[i + 1], todos[i]
        else:
            for i in range(from_index - 1, to_index - 1, -1):
                todos[i], todos[i + 1] = todos[i + 1], todos[i]
        return to_index

    def _search_window(self, index: int) -> tuple[int, int]:
        priority = self.todos[index].comparison_priority()
        if index + 1 < len(self.todos) and priority > self.todos[index + 1].comparison_priority():
            return index + 1, len(self.todos) - 1
        return 0, index

    def reorder(self, index: int) -> int:
        """Restore the order after the priority of the todo at index changed.

        Only that todo moves; every other todo must already be in order.

        Returns:
            The new index of the todo.
        """
        todos = self.todos
        priority = todos[index].comparison_priority()

        if priority < todos[0].comparison_priority():
            return self.move_index(index, 0)

        low, high = self._search_window(index)
        moving_later = low > index
        for middle in range(low, high):
            if (
                todos[middle].comparison_priority()
                <= priority
                < todos[middle + 1].comparison_priority()
            ):
                # Moving earlier, the todo goes right after the last smaller-or-equal one.
                target = middle if moving_later else middle + 1
                return self.move_index(index, target)
        return self.move_index(index, high)
