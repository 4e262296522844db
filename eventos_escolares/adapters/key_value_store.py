import json # json é utilizado para ler e gravar o arquivo do canal compartilhado.
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional
from ..utils.logger import logger


class KeyValueStore(ABC):
    """Armazenamento chave-valor compartilhado (equivalente ao localStorage do navegador)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retorna o valor da chave, ou None se ela não existir."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a chave. Não faz nada se ela não existir."""
        ...


class InMemoryKeyValueStore(KeyValueStore):
    """Canal compartilhado em memória, válido enquanto o processo existir."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileKeyValueStore(KeyValueStore):
    """
    Canal compartilhado gravado em um arquivo JSON, para que execuções
    diferentes da CLI consigam entregar um evento pendente uma à outra.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        """Carrega o conteúdo do arquivo."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Erro ao carregar o canal compartilhado {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Canal compartilhado {self.path} não contém um objeto JSON")
            return {}
        # valores que não são texto (gravados por outra ferramenta) voltam como JSON
        return {str(k): v if isinstance(v, str) else json.dumps(v, ensure_ascii=False) for k, v in data.items()}

    def _save(self, data: Dict[str, str]) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug(f"Chave gravada no canal compartilhado: {key}")

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
            logger.debug(f"Chave removida do canal compartilhado: {key}")
