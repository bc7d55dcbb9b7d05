"""Mission generator: bounty contracts scaled by system density, wealth and tier."""

from __future__ import annotations

import math

from procgen.core.enums import MissionType
from procgen.core.models import MissionDef, SystemDef
from procgen.systems.hashing import derive_seed
from procgen.systems.rng import create_rng
from procgen.utils.numeric import clamp_int, round_half_up

MIN_GOAL_KILLS = 6
MAX_GOAL_KILLS = 36
MIN_REWARD_CREDITS = 100

BOUNTY_TITLE = "Bounty Contract"


def get_mission(system: SystemDef, tier: int = 0) -> MissionDef:
    """Build the bounty mission for ``system`` at ``tier``.

    Only the kill jitter is sampled (one draw); the reward is plain arithmetic.
    """
    seed = derive_seed(system.seed, "mission", tier)
    rng = create_rng(seed)

    base_kills = 6 + round_half_up(system.poi_density * 10)
    tier_kills = math.floor(tier * 1.25)
    jitter = round_half_up(rng.range(-2, 3))
    goal_kills = clamp_int(base_kills + tier_kills + jitter, MIN_GOAL_KILLS, MAX_GOAL_KILLS)

    per_kill = 35 + round_half_up(system.economy.wealth * 30)
    tier_scalar = 1 + min(0.6, tier * 0.08)
    reward_credits = max(MIN_REWARD_CREDITS, round_half_up(goal_kills * per_kill * tier_scalar))

    return MissionDef(
        id=f"msn_{system.id}_t{tier}",
        seed=seed,
        tier=tier,
        type=MissionType.BOUNTY,
        title=BOUNTY_TITLE,
        description=f"Eliminate hostile fighters threatening {system.id}.",
        system_id=system.id,
        controlling_faction=system.controlling_faction,
        goal_kills=goal_kills,
        reward_credits=reward_credits,
    )
