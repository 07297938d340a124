"""Clock domain primitives: players, modes, stages and timing policies."""

from chessclock.core.enums import Mode, Player, Status
from chessclock.core.policy import delay_charge, recording_charge, turn_adjustment
from chessclock.core.stage import Stage, StageLike, find_stage, index_stages

__all__ = [
    "Mode",
    "Player",
    "Stage",
    "StageLike",
    "Status",
    "delay_charge",
    "find_stage",
    "index_stages",
    "recording_charge",
    "turn_adjustment",
]
