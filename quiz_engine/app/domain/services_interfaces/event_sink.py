from abc import ABC, abstractmethod
from quiz_engine.app.domain.entities.events import Event


class EventSinkInterface(ABC):
    @abstractmethod
    async def emit(self, event: Event) -> None:
        """
        Delivers an event to observers. Delivery is best effort, an implementation
        must not raise into the caller.

        :param event: The event to deliver
        """
        pass
