
from dataclasses import dataclass
from typing import List, Optional, Sequence

"""N-арный код Хаффмана для генерации беспрефиксных меток.

Поддерживает:
    - построение n-арного дерева Хаффмана по частотам элементов
    - выделение меток (путей корень -> лист) для каждого элемента

Метка — список индексов символов алфавита из диапазона [0, base).
Никакая метка не является префиксом другой, поэтому элемент можно
однозначно распознать по мере поступления символов (например, нажатий клавиш).
Отображение индексов в конкретные символы алфавита — забота вызывающего кода
(см. utils.labels_to_strings).

API:
    - label(base, freqs): функция, возвращающая метки в порядке входа.
    - Huffman(base): класс с методом label(freqs).
"""

# Отсутствующая ссылка на родителя / позиция среди братьев
_NONE = -1

# -------------------------------------------------------------------------------------------------

@dataclass
class _Node:
    """Узел дерева: лист (входной элемент) или ветвь (объединение до base детей)."""
    weight: int
    parent: int     = _NONE
    sibling: int    = _NONE
    total_hops: int = 0

# -------------------------------------------------------------------------------------------------

class _NodeHeap:
    """Min-куча индексов узлов, упорядоченная по весу.

    Классическая куча на массиве: heapify снизу вверх, pop меняет корень
    с последним элементом и просеивает вниз, push просеивает вверх.
    Сравнение строгое, поэтому при равных весах порядок определяется
    структурой кучи.
    """

    def __init__(self, nodes: List[_Node], items: List[int]):
        self._nodes = nodes
        self._items = items
        n = len(items)
        for i in range(n // 2 - 1, -1, -1):
            self._down(i, n)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> int:
        return self._items[i]

    def push(self, idx: int):
        self._items.append(idx)
        self._up(len(self._items) - 1)

    def pop(self) -> int:
        n = len(self._items) - 1
        self._swap(0, n)
        self._down(0, n)
        return self._items.pop()

    def _less(self, i: int, j: int) -> bool:
        return self._nodes[self._items[i]].weight < self._nodes[self._items[j]].weight

    def _swap(self, i: int, j: int):
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _up(self, j: int):
        while j > 0:
            i = (j - 1) // 2    # родитель
            if not self._less(j, i):
                break
            self._swap(i, j)
            j = i

    def _down(self, i: int, n: int):
        while True:
            j = 2 * i + 1       # левый ребёнок
            if j >= n:
                break
            if j + 1 < n and self._less(j + 1, j):
                j += 1          # правый ребёнок
            if not self._less(j, i):
                break
            self._swap(i, j)
            i = j

# -------------------------------------------------------------------------------------------------

class Huffman:
# -------------------------------------------------------------------------------------------------

    def __init__(self, base: int):
        """Создаёт генератор меток для алфавита из base символов

        Args:
            base (int): Количество символов алфавита. Должно быть >= 2.

        Raises:
            ValueError: Если base < 2.
        """

        if base < 2:
            raise ValueError("alphabet must have at least two elements")

        self.base = base
        self.nodes: List[_Node] = []
        self.heap: Optional[_NodeHeap] = None
        self._next_node = 0

# -------------------------------------------------------------------------------------------------

    def label(self, freqs: Sequence[int]) -> List[List[int]]:
        """Генерирует уникальные беспрефиксные метки для элементов по их частотам.

        Элементы с большей частотой получают более короткие метки.

        Args:
            freqs (Sequence[int]): freqs[i] — частота (приоритет) элемента i.
                Допускаются любые целые, в том числе 0 и отрицательные.

        Returns:
            List[List[int]]: labels[i] — метка элемента i, индексы символов
            алфавита из [0, base). Например, для алфавита "ab" метка [0, 1, 0]
            означает "aba".
        """

        # Пустой вход
        if len(freqs) == 0:
            return []

        # Единственный элемент получает метку из одного символа
        if len(freqs) == 1:
            return [[0]]

        try:
            self._allocate_nodes(freqs)
            root = self._build_tree()
            return self._extract_labels(len(freqs), root)
        finally:
            # Пул и куча нужны только на время вызова
            self.nodes = []
            self.heap = None
            self._next_node = 0

# -------------------------------------------------------------------------------------------------

    def _allocate_nodes(self, freqs: Sequence[int]):
        """Выделяет пул узлов под листья и все будущие ветви и заполняет кучу листьями.

        Каждое объединение убирает из кучи base узлов и добавляет один,
        т.е. уменьшает кучу на base-1. Для C элементов до одного узла нужно
            I = (C - 1) / (base - 1)
        итераций, а всего узлов N = C + I. Если на одной из итераций
        объединяется меньше base узлов, итераций может быть на одну больше,
        поэтому I дополняется единицей.
        """

        num_iters = (len(freqs) - 1) // (self.base - 1) + 1
        num_nodes = len(freqs) + num_iters

        self.nodes = [_Node(weight=f) for f in freqs]
        self.nodes.extend(_Node(weight=0) for _ in range(num_nodes - len(freqs)))
        self._next_node = len(freqs)

        self.heap = _NodeHeap(self.nodes, list(range(len(freqs))))

    def _combine(self, num_children: int):
        """Объединяет num_children самых лёгких узлов кучи в новую ветвь.

        Позиция ребёнка среди братьев — порядок извлечения из кучи
        (по возрастанию веса). Новая ветвь возвращается в кучу.

        Raises:
            RuntimeError: Если закончились узлы пула или куча опустела раньше времени.
        """

        parent_idx = self._next_node
        if parent_idx >= len(self.nodes):
            raise RuntimeError(f"node pool exhausted: {len(self.nodes)} nodes allocated")
        self._next_node += 1

        weight = 0
        total_hops = 0
        for i in range(num_children):
            if not self.heap:
                raise RuntimeError(f"heap exhausted after {i} of {num_children} children")

            child = self.nodes[self.heap.pop()]
            child.parent = parent_idx
            child.sibling = i
            weight += child.weight
            total_hops += child.total_hops

        parent = self.nodes[parent_idx]
        parent.weight = weight
        parent.total_hops = total_hops + num_children
        self.heap.push(parent_idx)

    def _build_tree(self) -> int:
        """Строит n-арное дерево Хаффмана и возвращает индекс корня.

        Первое объединение берёт меньше base узлов, чтобы все последующие
        объединения брали ровно base. Иначе пара лишних узлов на вершине
        дерева удлиняет метки самых частых элементов.
        """

        initial = 2 + (len(self.heap) - 2) % (self.base - 1)
        if initial > 0:
            self._combine(initial)

        while len(self.heap) > 1:
            self._combine(self.base)

        return self.heap[0]

    def _extract_labels(self, num_leaves: int, root: int) -> List[List[int]]:
        """Собирает метки листьев: путь от листа к корню, развёрнутый в обратную сторону.

        Все метки пишутся в один растущий буфер. root.total_hops (число рёбер дерева)
        служит лишь оценкой его размера и не ограничивает его.
        Первые num_leaves узлов пула — листья в порядке входа.
        """

        buf: List[int] = []
        labels = []

        for idx in range(num_leaves):
            start = len(buf)
            node = self.nodes[idx]
            while node.parent != _NONE:
                buf.append(node.sibling)
                node = self.nodes[node.parent]

            # Путь лист -> корень, разворачиваем в корень -> лист
            labels.append(buf[start:][::-1])

        return labels

# -------------------------------------------------------------------------------------------------

def label(base: int, freqs: Sequence[int]) -> List[List[int]]:
    """Генерирует беспрефиксные метки над алфавитом из base символов.

    Каждый вызов работает со своим экземпляром Huffman, общего состояния нет.

    Raises:
        ValueError: Если base < 2.
    """
    return Huffman(base).label(freqs)
