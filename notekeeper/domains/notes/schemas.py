from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List, Literal


class EventTarget(BaseModel):
    """Описание цели всплывшего события, как её видит клиент"""
    tag: str = Field(..., min_length=1, max_length=32)
    classes: List[str] = Field(default_factory=list)
    # Идентификатор ближайшей объемлющей заметки
    note_id: Optional[str] = None
    # Текущий текст поверхности для событий input
    text: Optional[str] = Field(None, max_length=1000000)

    @field_validator('tag')
    @classmethod
    def normalize_tag(cls, v):
        return v.strip().lower()


class BubbledEvent(BaseModel):
    """Событие, всплывшее до контейнера"""
    type: Literal["click", "input", "paste"]
    target: EventTarget
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class NoteResponse(BaseModel):
    """Схема для ответа с данными заметки"""
    note_id: str
    text: str
    editable: bool

    model_config = ConfigDict(from_attributes=True)


class NotesStateResponse(BaseModel):
    """Схема для текущего состояния контейнера"""
    notes: List[NoteResponse]
    snapshot: str
    focused_note_id: Optional[str]
    persistence_available: bool
    save_pending: bool
    startup_warning: Optional[str] = None


class RouteResultResponse(BaseModel):
    """Схема для результата маршрутизации события"""
    event_type: str
    role: str
    mutated: bool
    save_requested: bool
    default_prevented: bool
