import datetime # datetime é utilizado para manipular datas e horas.
import re
import time
from typing import Callable, Iterable, Iterator, List, Optional, Union
import pytz # pytz é uma biblioteca que fornece suporte para fusos horários.
from pydantic import ValidationError as PydanticValidationError
from ..adapters.key_value_store import KeyValueStore
from ..adapters.notifier import LoggerNotifier, Notifier, always_confirm
from ..config.settings import EventsConfig, config
from ..core.errors import MalformedPendingPayload, NotFoundError, ValidationError
from ..core.school_event import EventInput, PendingEventPayload, SchoolEvent
from ..utils.logger import logger

REQUIRED_FIELDS_MESSAGE = "Título, data e hora são obrigatórios"
DELETE_QUESTION = "Tem certeza que deseja excluir este evento?"

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def validate_event_input(data: EventInput) -> None:
    """
    Valida o formulário de evento: título, data e hora obrigatórios,
    data no formato AAAA-MM-DD e hora no formato HH:MM.

    Usada tanto pelo calendário quanto pelo painel, para que um evento
    aceito pelo painel nunca seja descartado na entrega.
    """
    missing = [name for name in ("title", "date", "time") if not getattr(data, name).strip()]
    if missing:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, missing)

    invalid = []
    date_value = data.date.strip()
    try:
        if not _DATE_PATTERN.fullmatch(date_value):
            raise ValueError(date_value)
        datetime.date.fromisoformat(date_value)
    except ValueError:
        invalid.append("date")

    time_value = data.time.strip()
    try:
        if not _TIME_PATTERN.fullmatch(time_value):
            raise ValueError(time_value)
        datetime.datetime.strptime(time_value, "%H:%M")
    except ValueError:
        invalid.append("time")

    if invalid:
        raise ValidationError(f"Campos inválidos: {', '.join(invalid)}", invalid)


def _invalid_fields(error: PydanticValidationError) -> List[str]:
    return list(dict.fromkeys(str(item["loc"][0]) for item in error.errors() if item["loc"]))


class EventListStore:
    """
    Mantém em memória a lista de eventos do calendário escolar.

    A lista não tem ordem significativa; a exibição sempre usa
    list_sorted_by_date(). O canal compartilhado é lido uma única vez,
    em initialize(), para receber o evento pendente deixado pelo painel.
    """

    def __init__(self,
                 side_channel: KeyValueStore,
                 notifier: Optional[Notifier] = None,
                 confirm: Optional[Callable[[str], bool]] = None,
                 seed: Optional[Iterable[SchoolEvent]] = None,
                 settings: Optional[EventsConfig] = None):
        self.settings = settings or config.events
        self.side_channel = side_channel
        self.notifier = notifier or LoggerNotifier()
        self.confirm = confirm or always_confirm
        self._events: List[SchoolEvent] = [event.model_copy(deep=True) for event in (seed or [])]
        self._initialized = False
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[SchoolEvent]:
        return iter(list(self._events))

    def get(self, event_id: str) -> Optional[SchoolEvent]:
        """Retorna o evento com o id informado, ou None."""
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def _now(self) -> datetime.datetime:
        return datetime.datetime.now(pytz.timezone(self.settings.timezone))

    def _next_id(self) -> str:
        """Gera um id a partir do timestamp em milissegundos, único dentro da lista."""
        existing = {event.id for event in self._events}
        candidate = max(int(time.time() * 1000), self._last_id + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def _validate(self, data: EventInput) -> None:
        try:
            validate_event_input(data)
        except ValidationError as e:
            self.notifier.error(str(e))
            raise

    def _reject(self, error: PydanticValidationError) -> ValidationError:
        fields = _invalid_fields(error)
        failure = ValidationError(f"Campos inválidos: {', '.join(fields)}", fields)
        self.notifier.error(str(failure))
        return failure

    def _build_event(self, data: Union[EventInput, PendingEventPayload]) -> SchoolEvent:
        """Monta um novo registro a partir dos dados do formulário (sem validar)."""
        attendees = getattr(data, "attendees", None)
        if attendees is None:
            attendees = self.settings.default_attendees

        return SchoolEvent(
            id=self._next_id(),
            title=data.title.strip(),
            description=data.description.strip(),
            date=data.date.strip(),
            time=data.time.strip(),
            location=data.location.strip(),
            type=data.type,
            attendees=list(attendees),
            created_at=self._now()
        )

    def create(self, data: EventInput) -> SchoolEvent:
        """Cria um evento e o adiciona à lista."""
        self._validate(data)
        try:
            event = self._build_event(data)
        except PydanticValidationError as e:
            raise self._reject(e) from e

        self._events.append(event)

        logger.info(f"Evento criado: {event.title} (ID: {event.id})")
        self.notifier.success("Evento criado com sucesso")
        return event

    def update(self, event_id: str, data: EventInput) -> SchoolEvent:
        """
        Substitui os campos editáveis do evento. id e created_at não mudam;
        o público só é trocado quando o formulário o informa.
        """
        event = self.get(event_id)
        if event is None:
            error = NotFoundError(event_id)
            self.notifier.error(str(error))
            raise error

        self._validate(data)

        changes = {
            'title': data.title.strip(),
            'description': data.description.strip(),
            'date': data.date.strip(),
            'time': data.time.strip(),
            'location': data.location.strip(),
            'type': data.type
        }
        if data.attendees is not None:
            changes['attendees'] = list(data.attendees)

        # valida o novo estado inteiro antes de alterar o registro
        try:
            updated = SchoolEvent.model_validate({**event.model_dump(), **changes})
        except PydanticValidationError as e:
            raise self._reject(e) from e

        for name in changes:
            setattr(event, name, getattr(updated, name))

        logger.info(f"Evento atualizado: {event.title} (ID: {event.id})")
        self.notifier.success("Evento atualizado com sucesso")
        return event

    def delete(self, event_id: str) -> bool:
        """
        Remove o evento depois da confirmação do usuário.

        Retorna True se algum evento foi removido. Um id inexistente é ignorado.
        """
        if not self.confirm(DELETE_QUESTION):
            logger.info(f"Exclusão cancelada pelo usuário: {event_id}")
            return False

        remaining = [event for event in self._events if event.id != event_id]
        if len(remaining) == len(self._events):
            logger.debug(f"Nenhum evento para excluir com ID {event_id}")
            return False

        self._events = remaining
        logger.info(f"Evento excluído: {event_id}")
        self.notifier.success("Evento excluído com sucesso")
        return True

    def list_sorted_by_date(self) -> List[SchoolEvent]:
        """Eventos em ordem crescente de data; empates mantêm a ordem de inserção."""
        return sorted(self._events, key=lambda event: event.date)

    def initialize(self) -> None:
        """Ativação do calendário: consome o evento pendente uma única vez."""
        if self._initialized:
            logger.warning("Calendário já inicializado, ignorando nova inicialização")
            return
        self._initialized = True
        self.ingest_pending()

    def _event_from_pending(self, raw: str) -> SchoolEvent:
        try:
            payload = PendingEventPayload.model_validate_json(raw)
            return self._build_event(payload)
        except ValueError as e:
            raise MalformedPendingPayload(f"Evento pendente inválido: {e}", raw) from e

    def ingest_pending(self) -> Optional[SchoolEvent]:
        """
        Lê o evento pendente do canal compartilhado e o adiciona à lista.

        A chave é sempre removida após a leitura, com ou sem sucesso, para
        que um conteúdo inválido não seja reprocessado.
        """
        key = self.settings.pending_event_key
        raw = self.side_channel.get(key)
        if raw is None:
            return None

        try:
            event = self._event_from_pending(raw)
        except MalformedPendingPayload as e:
            logger.error(f"Erro ao processar evento pendente: {e}")
            return None
        finally:
            self.side_channel.delete(key)

        self._events.append(event)
        logger.info(f"Evento pendente recebido do painel: {event.title} (ID: {event.id})")
        self.notifier.success("Evento criado a partir do painel")
        return event
