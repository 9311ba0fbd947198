from quiz_engine.app.domain.services_interfaces.event_sink import EventSinkInterface
from quiz_engine.app.domain.entities.events import Event
import logging


logger = logging.getLogger('events')


class LoggingEventSink(EventSinkInterface):
    def __init__(self):
        # Every emitted event in order, for observers that poll instead of reading logs
        self.events: list[Event] = []

    async def emit(self, event: Event) -> None:
        self.events.append(event)
        logger.info(event.model_dump_json(), extra={'user': getattr(event, 'account', 'SYSTEM')})


class NullEventSink(EventSinkInterface):
    async def emit(self, event: Event) -> None:
        pass
