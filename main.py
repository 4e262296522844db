import argparse
import sys
import os

# Adiciona o diretório do projeto ao PYTHONPATH
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from eventos_escolares.adapters.key_value_store import JsonFileKeyValueStore
from eventos_escolares.adapters.notifier import LoggerNotifier, always_confirm, console_confirm
from eventos_escolares.config.settings import config
from eventos_escolares.core.dashboard import submit_pending_event
from eventos_escolares.core.errors import EventStoreError
from eventos_escolares.core.event_store import EventListStore
from eventos_escolares.core.mock_data import mock_events
from eventos_escolares.core.school_event import EVENT_TYPES, EventInput
from eventos_escolares.utils.logger import logger


def _add_event_options(parser, required=True):
    parser.add_argument('--titulo', required=required, help='Título do evento')
    parser.add_argument('--data', required=required, help='Data no formato AAAA-MM-DD')
    parser.add_argument('--hora', required=required, help='Hora no formato HH:MM')
    parser.add_argument('--descricao', default=None, help='Descrição do evento')
    parser.add_argument('--local', default=None, help='Local do evento')
    parser.add_argument('--tipo', choices=EVENT_TYPES, default=None, help='Categoria do evento')
    parser.add_argument('--publico', nargs='+', default=None,
                        help='Público do evento (ex.: students teachers parents)')


def build_parser():
    parser = argparse.ArgumentParser(description='Calendário de Eventos Escolares')
    parser.add_argument(
        '--canal',
        default=config.events.side_channel_file,
        help='Arquivo JSON usado como canal compartilhado com o painel'
    )

    subparsers = parser.add_subparsers(dest='comando', required=True)

    subparsers.add_parser('listar', help='Lista os eventos em ordem de data')

    criar = subparsers.add_parser('criar', help='Cria um novo evento')
    _add_event_options(criar)

    atualizar = subparsers.add_parser('atualizar', help='Atualiza um evento existente')
    atualizar.add_argument('id', help='ID do evento')
    _add_event_options(atualizar, required=False)

    remover = subparsers.add_parser('remover', help='Exclui um evento')
    remover.add_argument('id', help='ID do evento')
    remover.add_argument('--sim', action='store_true', help='Não pede confirmação')

    agendar = subparsers.add_parser('agendar', help='Envia um evento do painel para o calendário')
    _add_event_options(agendar)

    return parser


def _event_input(args, current=None) -> EventInput:
    """Monta o formulário a partir dos argumentos; campos omitidos mantêm o valor atual."""
    values = {}
    if current is not None:
        values = {
            'title': current.title,
            'description': current.description,
            'date': current.date.isoformat(),
            'time': current.time,
            'location': current.location,
            'type': current.type
        }

    options = {
        'title': args.titulo,
        'description': args.descricao,
        'date': args.data,
        'time': args.hora,
        'location': args.local,
        'type': args.tipo,
        'attendees': args.publico
    }
    values.update({field: value for field, value in options.items() if value is not None})
    return EventInput(**values)


def print_events(events, out=None):
    """Imprime a lista de eventos, um por linha."""
    out = out or sys.stdout
    if not events:
        print("Nenhum evento cadastrado.", file=out)
        return
    for event in events:
        line = f"[{event.id}] {event.date.isoformat()} {event.time} | {event.title} ({event.type.capitalize()})"
        if event.location:
            line += f" @ {event.location}"
        print(line, file=out)


def main(argv=None):
    """Função principal da CLI do calendário de eventos."""
    args = build_parser().parse_args(argv)
    side_channel = JsonFileKeyValueStore(args.canal)
    notifier = LoggerNotifier()

    try:
        if args.comando == 'agendar':
            submit_pending_event(side_channel, _event_input(args), notifier)
            return 0

        confirm = always_confirm if getattr(args, 'sim', False) else console_confirm
        seed = mock_events() if config.events.seed_mock_events else []
        store = EventListStore(side_channel, notifier=notifier, confirm=confirm, seed=seed)
        store.initialize()

        if args.comando == 'criar':
            store.create(_event_input(args))
        elif args.comando == 'atualizar':
            store.update(args.id, _event_input(args, current=store.get(args.id)))
        elif args.comando == 'remover':
            store.delete(args.id)

        print_events(store.list_sorted_by_date())

    except EventStoreError as e:
        logger.error(f"Erro durante a execução: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
