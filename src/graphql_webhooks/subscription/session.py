from asyncio import Task, current_task, wait
from typing import Any, AsyncIterator, Dict, Iterator, List, Optional

__all__ = ["Session", "SessionStore", "close_stream"]


class Session:
    """A live subscription session.

    Holds the subscribed field, the URL the results are delivered to, the stream
    producing the results and the task pumping them from the stream to the URL.
    """

    __slots__ = "id", "name", "url", "stream", "task"

    id: str
    name: str
    url: str
    stream: AsyncIterator[Any]
    task: Optional[Task]

    def __init__(
        self,
        id_: str,
        name: str,
        url: str,
        stream: AsyncIterator[Any],
        task: Optional[Task] = None,
    ) -> None:
        self.id = id_
        self.name = name
        self.url = url
        self.stream = stream
        self.task = task

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.id} {self.name!r} -> {self.url!r}>"

    async def close(self) -> None:
        """Cancel the pump task and release the stream.

        When called from within the pump task itself, the task is left alone.
        """
        task = self.task
        if task and not task.done() and task is not current_task():
            task.cancel()
            await wait([task])
        await close_stream(self.stream)


async def close_stream(stream: AsyncIterator[Any]) -> None:
    """Close the given stream if it supports closing."""
    aclose = getattr(stream, "aclose", None)
    if aclose:
        try:
            await aclose()
        except RuntimeError:  # the generator is still running in a cancelled task
            pass


class SessionStore:
    """Active sessions by their identifiers.

    Adding and removing sessions never awaits, so other tasks never see a
    partially added or removed session.
    """

    __slots__ = ("_sessions",)

    _sessions: Dict[str, Session]

    def __init__(self) -> None:
        self._sessions = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sessions))

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def add(self, session: Session) -> None:
        if session.id in self._sessions:
            raise ValueError(f"Session '{session.id}' already exists.")
        self._sessions[session.id] = session

    def pop(self, session_id: str) -> Optional[Session]:
        """Remove the session with the given id and return it.

        Returns ``None`` if there is no such session.
        """
        return self._sessions.pop(session_id, None)

    def discard(self, session: Session) -> bool:
        """Remove exactly this session if it is still stored."""
        if self._sessions.get(session.id) is session:
            del self._sessions[session.id]
            return True
        return False

    def pop_all(self) -> List[Session]:
        sessions = list(self._sessions.values())
        self._sessions.clear()
        return sessions
