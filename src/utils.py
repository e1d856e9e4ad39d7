from typing import List, Optional, Sequence, Tuple

def check_alphabet(alphabet: str):
    """Проверяет, что алфавит пригоден для меток.

    Args:
        alphabet (str): Символы алфавита, индекс символа = его номер в метке.

    Raises:
        ValueError: Если символов меньше двух или есть повторы.
    """
    if len(alphabet) < 2:
        raise ValueError("alphabet must have at least two elements")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"alphabet has duplicate symbols: {alphabet!r}")

def label_to_string(alphabet: str, label: Sequence[int]) -> str:
    """Переводит метку из индексов в строку символов алфавита.

    Пример:
        Вход: "ab", [0, 1, 0]
        Выход: "aba"
    """
    return "".join(alphabet[idx] for idx in label)

def labels_to_strings(alphabet: str, labels: Sequence[Sequence[int]]) -> List[str]:
    """Переводит список меток в список строк (порядок сохраняется)."""
    return [label_to_string(alphabet, label) for label in labels]

def string_to_label(alphabet: str, text: str) -> List[int]:
    """Обратная операция к label_to_string.

    Raises:
        ValueError: Если в строке есть символ вне алфавита.
    """
    label = []
    for ch in text:
        idx = alphabet.find(ch)
        if idx < 0:
            raise ValueError(f"symbol {ch!r} is not in alphabet {alphabet!r}")
        label.append(idx)
    return label

def find_prefix_conflict(labels: Sequence[Sequence]) -> Optional[Tuple[int, int]]:
    """Ищет пару меток, нарушающую беспрефиксность.

    Метки сортируются лексикографически: если какая-то метка — префикс другой
    (или совпадает с ней), то после сортировки они окажутся соседями.

    Returns:
        Optional[Tuple[int,int]]: (i, j) — метка j является префиксом метки i,
        либо None, если конфликтов нет.
    """
    order = sorted(range(len(labels)), key=lambda i: list(labels[i]))
    for a, b in zip(order, order[1:]):
        left, right = list(labels[a]), list(labels[b])
        if right[:len(left)] == left:
            return b, a
    return None

def is_prefix_free(labels: Sequence[Sequence]) -> bool:
    return find_prefix_conflict(labels) is None

def expected_length(freqs: Sequence[int], labels: Sequence[Sequence]) -> float:
    """Средняя длина метки, взвешенная по частотам.

    Если сумма частот не положительна, возвращается обычное среднее.
    """
    if not labels:
        return 0.0
    total = sum(freqs)
    if total <= 0:
        return sum(len(l) for l in labels) / len(labels)
    return sum(f * len(l) for f, l in zip(freqs, labels)) / total

def parse_items(tokens: Sequence[str]) -> List[Tuple[str, int]]:
    """Разбирает элементы вида name=freq или name:freq.

    Args:
        tokens (Sequence[str]): Строки с элементами.

    Returns:
        List[Tuple[str,int]]: Пары (имя, частота) в порядке входа.

    Raises:
        ValueError: Если строка не содержит разделителя или частота не целое число.

    Пример:
        Вход: ["type=530", "value:169"]
        Выход: [("type", 530), ("value", 169)]
    """
    items = []
    for token in tokens:
        # Разделитель — последний '=' или ':', имя может их содержать
        sep = max(token.rfind("="), token.rfind(":"))
        if sep <= 0:
            raise ValueError(f"expected name=freq, got {token!r}")
        name, freq = token[:sep].strip(), token[sep + 1:].strip()
        try:
            items.append((name, int(freq)))
        except ValueError:
            raise ValueError(f"frequency of {name!r} is not an integer: {freq!r}") from None
    return items
