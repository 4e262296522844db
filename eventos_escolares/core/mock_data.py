import datetime
from typing import List
import pytz
from ..core.school_event import SchoolEvent

# Dados de exemplo enquanto não existe uma API de eventos
_MOCK_EVENTS = [
    {
        'id': '1',
        'title': 'Annual Sports Day',
        'description': 'School annual sports competition for all grades',
        'date': '2024-12-15',
        'time': '09:00',
        'location': 'School Playground',
        'type': 'sports',
        'attendees': ['students', 'teachers', 'parents'],
        'createdAt': datetime.datetime(2024, 11, 1, tzinfo=pytz.UTC)
    },
    {
        'id': '2',
        'title': 'Parent-Teacher Meeting',
        'description': 'Monthly parent-teacher conference',
        'date': '2024-12-20',
        'time': '14:00',
        'location': 'Main Hall',
        'type': 'meeting',
        'attendees': ['teachers', 'parents'],
        'createdAt': datetime.datetime(2024, 11, 5, tzinfo=pytz.UTC)
    },
    {
        'id': '3',
        'title': 'Winter Break',
        'description': 'School winter vacation',
        'date': '2024-12-25',
        'time': '00:00',
        'location': 'School',
        'type': 'holiday',
        'attendees': ['students', 'teachers'],
        'createdAt': datetime.datetime(2024, 10, 15, tzinfo=pytz.UTC)
    }
]


def mock_events() -> List[SchoolEvent]:
    """Retorna uma cópia nova dos eventos de exemplo."""
    return [SchoolEvent.model_validate(data) for data in _MOCK_EVENTS]
