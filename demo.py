#!/usr/bin/env python3
"""Watch a random player uncover cells."""
import time
import os

from src.sweeper.board import BoardConfig
from src.sweeper.environment import MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 10, seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(size=size)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    cell_count = size * size

    print(f"Board: {size}x{size}, each cell a mine with p={config.mine_probability}")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    for game in range(games):
        if game > 0:
            obs, info = env.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} | {info['flags']} flags ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            # Random player only uncovers
            mask = env.get_action_mask()
            mask[cell_count:] = 0
            action = env.action_space.sample(mask=mask)
            row, col = divmod(action, size)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=10, help="Board size (NxN)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, seed=args.seed)
