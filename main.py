import logging

import matplotlib.pyplot as plt

import config
from costs import get_cost_function
from dem import DEM
from mission import get_algorithm, run_mission
from visualise import show_result, plot_terrain_3d


def wait_for_exit():
    input("\npress enter to exit\n")


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Generate terrain
    print(f"Generating {config.SIZE}x{config.SIZE} terrain (roughness {config.ROUGHNESS})...")
    dem = DEM(seed=config.SEED)
    dem.make_dem(config.SIZE, config.ROUGHNESS)

    if config.SHOW_TERRAIN:
        print(dem.to_ascii())
        print("\n")

    last_result = None
    for algorithm_name, cost_name in config.MISSIONS:
        find_shortest_path = get_algorithm(algorithm_name)
        cost_fn = get_cost_function(cost_name)

        print(f"Running {algorithm_name} with {cost_name} cost...")
        result = run_mission(
            dem,
            find_shortest_path,
            cost_fn,
            source=config.SOURCE_VERTEX,
            target=config.TARGET_VERTEX,
        )

        if not result.path.found:
            print("No path found.")
            continue

        print(dem.to_ascii(result.traversed))
        print(f"\ntotal energy: {result.energy}")
        print(f"route: {result.path}\n\n")

        if config.DISPLAY_FINAL:
            show_result(dem.heights, result.path, title=f"{algorithm_name} / {cost_name}")
        last_result = result

    if config.PLOT_3D and last_result is not None:
        plot_terrain_3d(dem.heights, last_result.path)
        plt.show()

    if config.WAIT_FOR_EXIT:
        wait_for_exit()


if __name__ == "__main__":
    main()
