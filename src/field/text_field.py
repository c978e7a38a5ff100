"""NumericTextField — контроллер числового поля ввода без привязки к GUI.

Хранит связанный текст поля и выполняет wiring, который UI-слой делает вокруг
ядра:
- любое присваивание текста проходит через фильтр
- при появлении поля, окончании редактирования и commit текст реформатируется
- колбэки on_editing_changed / on_commit вызываются после реформата
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from src.core.domain.numeric_style import DEFAULT_STYLE, KeyboardKind, NumericStyle
from src.core.text.numeric_filter import filter_numeric_text
from src.core.text.reformatter import parse_number, reformat

log = logging.getLogger(__name__)


class ChangeReason(str, Enum):
    """Источник изменения текста поля."""
    INPUT = "input"
    APPEAR = "appear"
    EDITING_ENDED = "editing_ended"
    COMMIT = "commit"


@dataclass(frozen=True)
class TextChange:
    """Результат присваивания текста полю."""

    previous: str
    proposed: str
    text: str
    reason: ChangeReason

    @property
    def changed(self) -> bool:
        return self.text != self.previous

    @property
    def filtered(self) -> bool:
        """True если фильтр что-то отбросил из предложенного текста."""
        return self.text != self.proposed


class NumericTextField:
    """Числовое поле: фильтр на каждое изменение, реформат на границах редактирования.

    Последовательность событий UI:
    - appear() при показе поля
    - set_text(...) на каждое изменение текста пользователем
    - editing_changed(True) при получении фокуса (текст не меняется)
    - editing_changed(False) при потере фокуса → реформат
    - commit() при подтверждении (Return) → реформат
    """

    def __init__(
        self,
        text: str = "",
        style: NumericStyle = DEFAULT_STYLE,
        reformatter: Optional[Callable[[str], str]] = None,
        on_editing_changed: Optional[Callable[[bool], None]] = None,
        on_commit: Optional[Callable[[], None]] = None,
        on_text_changed: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            text: начальный текст (фильтруется сразу)
            style: стиль допустимого ввода
            reformatter: str -> str для границ редактирования
                (default: reformat с учётом стиля, см. _style_reformat)
            on_editing_changed: вызывается с флагом "редактируется ли поле"
            on_commit: вызывается после commit
            on_text_changed: вызывается с новым текстом при каждом его изменении
        """
        self.style = style
        self.reformatter = reformatter or self._style_reformat
        self.on_editing_changed = on_editing_changed
        self.on_commit = on_commit
        self.on_text_changed = on_text_changed

        self._text = filter_numeric_text(text, style)
        self._is_editing = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_editing(self) -> bool:
        return self._is_editing

    @property
    def value(self) -> Optional[float]:
        """Числовое значение текста или None для промежуточных состояний ('-', '1E')."""
        return parse_number(self._text, self.style.decimal_mark)

    @property
    def in_range(self) -> bool:
        """True если текст — число в рекомендательном диапазоне стиля."""
        value = self.value
        return value is not None and self.style.contains(value)

    @property
    def keyboard(self) -> KeyboardKind:
        return self.style.keyboard

    def set_text(self, proposed: str, reason: ChangeReason = ChangeReason.INPUT) -> TextChange:
        """Присваивание текста через фильтр стиля.

        Args:
            proposed: предложенный текст (ввод пользователя или результат реформата)
            reason: источник изменения

        Returns:
            TextChange с итоговым текстом
        """
        previous = self._text
        self._text = filter_numeric_text(proposed, self.style)
        change = TextChange(
            previous=previous,
            proposed=proposed,
            text=self._text,
            reason=reason,
        )

        if change.changed:
            log.debug("Field text %r -> %r (%s)", previous, self._text, reason.value)
            if self.on_text_changed is not None:
                self.on_text_changed(self._text)

        return change

    def appear(self) -> TextChange:
        """Реформат текста при показе поля."""
        return self._reformat(ChangeReason.APPEAR)

    def editing_changed(self, is_editing: bool) -> Optional[TextChange]:
        """Начало/окончание редактирования.

        Окончание (is_editing=False) реформатирует текст, начало — нет.
        Колбэк on_editing_changed вызывается в обоих случаях, после реформата.

        Returns:
            TextChange при окончании редактирования, иначе None
        """
        self._is_editing = is_editing
        change = None
        if not is_editing:
            change = self._reformat(ChangeReason.EDITING_ENDED)

        if self.on_editing_changed is not None:
            self.on_editing_changed(is_editing)
        return change

    def commit(self) -> TextChange:
        """Подтверждение ввода: реформат, затем on_commit."""
        change = self._reformat(ChangeReason.COMMIT)
        if self.on_commit is not None:
            self.on_commit()
        return change

    def _reformat(self, reason: ChangeReason) -> TextChange:
        return self.set_text(self.reformatter(self._text), reason)

    def _style_reformat(self, text: str) -> str:
        """Реформат, результат которого переживает фильтр стиля.

        Без экспоненты в стиле научная запись не используется. Если фильтр
        всё равно изменил бы значение (например, '1.23456E5' без разделителя),
        текст остаётся как набран.
        """
        mark = self.style.decimal_mark
        candidate = reformat(text, decimal_mark=mark, scientific=self.style.allow_exponent)

        value = parse_number(text, mark)
        if parse_number(filter_numeric_text(candidate, self.style), mark) != value:
            log.debug("Reformat %r -> %r would change value under style, kept", text, candidate)
            return text
        return candidate
