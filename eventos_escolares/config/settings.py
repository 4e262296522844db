import os # utilizado para ler as variáveis de ambiente
from typing import List
from dotenv import load_dotenv # utilizado para carregar as variaveis de ambiente
from pydantic import BaseModel # basemodel é uma classe que permite criar classes com tipos de dados

load_dotenv() # carregando as variáveis de ambiente


def _env_list(name: str, default: str) -> List[str]:
    """Lê uma lista separada por vírgulas de uma variável de ambiente."""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "sim")


# Configuração do calendário de eventos
class EventsConfig(BaseModel):
    pending_event_key: str = os.getenv("PENDING_EVENT_KEY", "pendingEvent")
    side_channel_file: str = os.getenv("SIDE_CHANNEL_FILE", "local_storage.json")
    default_attendees: List[str] = _env_list("DEFAULT_ATTENDEES", "students,teachers")
    timezone: str = os.getenv("EVENTS_TIMEZONE", "UTC")
    seed_mock_events: bool = _env_bool("SEED_MOCK_EVENTS", "true")

# Configuração de logs
class LogConfig(BaseModel):
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "eventos_escolares.log")

# Classe principal de configuração
class config(BaseModel):
    events: EventsConfig = EventsConfig()
    log: LogConfig = LogConfig()

# Criando uma instância global de configuração
config = config()
