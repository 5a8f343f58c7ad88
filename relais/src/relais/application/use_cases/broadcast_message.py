"""
Use case for broadcasting messages to channels.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Union

from shared.reporter import SystemReporter

from relais.domain.entities import Connection

PayloadFactory = Callable[[Connection], Dict[str, Any]]


class BroadcastMessageUseCase:
    """
    Use case for fanning a payload out to channel members.

    Delivery is fire-and-forget: closed members are skipped and a
    failure on one member never affects the others.
    """

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.reporter = reporter

    def execute(
        self,
        members: Iterable[Connection],
        payload: Union[Dict[str, Any], PayloadFactory],
        exclude: Optional[Connection] = None,
    ) -> int:
        """
        Deliver payload to members.

        Args:
            members: Member snapshot of the target channel
            payload: Payload dict, or a callable building one per member
            exclude: Optional member to skip (usually the actor)

        Returns:
            Number of members the payload was handed to
        """
        sent_count = 0

        for member in members:
            if exclude is not None and member == exclude:
                continue

            message = payload(member) if callable(payload) else payload

            try:
                if member.send(message):
                    sent_count += 1
            except Exception as e:
                if self.reporter:
                    self.reporter.warning(
                        f"Broadcast to member failed [conn={member.id}]: "
                        f"{type(e).__name__}: {str(e)}",
                        context="Broadcast",
                    )

        return sent_count
