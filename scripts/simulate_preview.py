"""What would the landing page recommend after a few minutes of activity?

Runs the live-counter simulation for a fixed seed, prints the counters
every N ticks and the recommendation for the final snapshot.

Usage:
    python scripts/simulate_preview.py [goal] [ticks] [seed]
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fitcoach.coach.live_preview import LiveStatsSimulator, live_to_daily_stats
from fitcoach.coach.recommendations import generate_recommendations
from fitcoach.schemas.recommendation import UserGoals

PRINT_EVERY = 60


def main(goal: str = "general_health", ticks: int = 600, seed: int = 42) -> None:
    sim = LiveStatsSimulator(seed=seed)

    print(f"{'tick':>6}  {'steps':>6}  {'kcal':>5}  {'hr':>4}  {'sleep':>5}")
    print("-" * 36)
    for t in range(1, ticks + 1):
        live = sim.tick()
        if t % PRINT_EVERY == 0:
            print(f"{t:>6}  {live.steps:>6}  {live.calories:>5}  {live.hr:>4}  {live.sleep:>5}")

    stats = live_to_daily_stats(sim.snapshot())
    goals = UserGoals(goal=goal)
    rec = generate_recommendations(stats, goals)

    print()
    print(f"Goal: {goals.goal.value}")
    print("Workouts:")
    for w in rec.workouts:
        print(f"  - {w}")
    print("Diet:")
    for d in rec.diet:
        print(f"  - {d}")
    print(f"Hydration target: {rec.hydration_liters} L/day")
    for note in rec.reasoning:
        print(f"  ! {note}")
    print(f"Confidence: {rec.confidence * 100:.0f}%")


if __name__ == "__main__":
    args = sys.argv[1:]
    main(
        goal=args[0] if len(args) > 0 else "general_health",
        ticks=int(args[1]) if len(args) > 1 else 600,
        seed=int(args[2]) if len(args) > 2 else 42,
    )
