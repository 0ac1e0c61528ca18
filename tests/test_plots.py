import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from common.colors import pick_match_colors
from common.plots import plot_stat_comparison
from controllers.stats_controller import compute_stat_comparison


def test_plot_stat_comparison_draws_two_bars_per_stat(live_store):
    live_store.adjust_counter("Vikings", "shots", 2)
    comparison = compute_stat_comparison(live_store.state)
    palette = pick_match_colors("Vikings", "Dragons")

    fig, ax = plt.subplots()
    try:
        plot_stat_comparison(comparison, "Vikings", "Dragons",
                             colors_map=palette.as_map("Vikings", "Dragons"), ax=ax)
        assert len(ax.patches) == 2 * len(comparison)
        assert {t.get_text() for t in ax.get_yticklabels()} == set(comparison["Stat"])
    finally:
        plt.close(fig)
