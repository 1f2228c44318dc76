"""Per-request session context.

Replaces process-wide auth flags: whoever needs the signed-in doctor or the
demo switch receives this object explicitly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    """Who is signed in and which data backend serves them."""

    doctor_id: str
    demo_mode: bool = False
