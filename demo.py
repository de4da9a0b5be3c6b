"""
Growable Sequence Demo -- capacity growth, amortized copy cost, explicit capacity
control, and a push_back timing comparison against the built-in list.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from growable_sequence import GrowableSequence, GROWTH_FACTOR
from growth_analysis import (
    capacity_trace,
    copy_trace,
    amortized_copy_cost,
    growth_events,
    reserve_schedule,
    slack_ratio,
    summarize,
)

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

N_PUSHES = 1000

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


# ---------------------------------------------------------------------------
# Example 1: Capacity Growth
# ---------------------------------------------------------------------------
def example_1_capacity_growth():
    """Show the doubling staircase and the slack it leaves behind."""
    print("=" * 60)
    print("Example 1: Capacity Growth")
    print("=" * 60)

    caps = capacity_trace(N_PUSHES)
    events = growth_events(caps)
    slack = slack_ratio(caps)

    print(f"\n  Pushes: {N_PUSHES}, growth factor: {GROWTH_FACTOR}")
    print(f"  Reallocations: {events.size}")
    print(f"  {'Push #':>8} {'Capacity':>10}")
    print(f"  {'-'*20}")
    for idx in events:
        print(f"  {idx + 1:>8} {caps[idx]:>10}")
    print(f"\n  Worst unused fraction: {slack.max():.3f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    pushes = np.arange(1, N_PUSHES + 1)

    axes[0].step(pushes, caps, where="post", color=COLORS["blue"], label="capacity")
    axes[0].plot(pushes, pushes, color=COLORS["dark"], linestyle="--", label="length")
    axes[0].set_xlabel("Elements pushed")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity vs Length\nDoubling on overflow", fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(pushes, slack, color=COLORS["orange"])
    axes[1].set_xlabel("Elements pushed")
    axes[1].set_ylabel("Unused fraction")
    axes[1].set_title("Slack After Each Push\nNever above 1/2 after the first push",
                      fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_capacity_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_capacity_growth.png")


# ---------------------------------------------------------------------------
# Example 2: Amortized Copy Cost
# ---------------------------------------------------------------------------
def example_2_amortized_cost():
    """Copies per push stay bounded even though single pushes can copy a lot."""
    print("\n" + "=" * 60)
    print("Example 2: Amortized Copy Cost")
    print("=" * 60)

    copies = copy_trace(N_PUSHES)
    amortized = amortized_copy_cost(N_PUSHES)

    for n in (10, 100, N_PUSHES):
        s = summarize(n)
        print(f"\n  n={n}: final capacity {s['final_capacity']}, "
              f"{s['reallocations']} reallocations, {s['total_copies']} copies, "
              f"{s['amortized_cost']:.3f} copies/push")

    assert amortized.max() < GROWTH_FACTOR, "amortized cost exceeded growth factor"
    print(f"\n  Max running mean: {amortized.max():.3f} < {GROWTH_FACTOR}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    pushes = np.arange(1, N_PUSHES + 1)

    axes[0].bar(pushes, copies, color=COLORS["red"], width=4.0)
    axes[0].set_xlabel("Push #")
    axes[0].set_ylabel("Elements copied")
    axes[0].set_title("Copies per Push\nRare but growing spikes", fontweight="bold")
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].plot(pushes, amortized, color=COLORS["green"])
    axes[1].axhline(GROWTH_FACTOR, color=COLORS["dark"], linestyle="--",
                    label=f"bound = {GROWTH_FACTOR}")
    axes[1].set_xlabel("Elements pushed")
    axes[1].set_ylabel("Copies / push")
    axes[1].set_title("Running Amortized Cost", fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_amortized_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_amortized_cost.png")


# ---------------------------------------------------------------------------
# Example 3: Explicit Capacity Control
# ---------------------------------------------------------------------------
def example_3_capacity_control():
    """reserve, extend, pop_back, truncate and shrink_to_fit side by side."""
    print("\n" + "=" * 60)
    print("Example 3: Explicit Capacity Control")
    print("=" * 60)

    seq = GrowableSequence.from_literal([1, 2, 3, 4])
    steps = [("from_literal([1, 2, 3, 4])", len(seq), seq.capacity())]
    seq.extend([5, 6, 7, 8])
    steps.append(("extend([5, 6, 7, 8])", len(seq), seq.capacity()))
    seq.pop_back()
    steps.append(("pop_back()", len(seq), seq.capacity()))
    seq.truncate(2)
    steps.append(("truncate(2)", len(seq), seq.capacity()))
    seq.shrink_to_fit()
    steps.append(("shrink_to_fit()", len(seq), seq.capacity()))
    seq.reserve(7)
    steps.append(("reserve(7)", len(seq), seq.capacity()))

    print(f"\n  {'Operation':<28} {'Length':>8} {'Capacity':>10}")
    print(f"  {'-'*48}")
    for name, length, cap in steps:
        print(f"  {name:<28} {length:>8} {cap:>10}")

    print(f"\n  reserve(7) on a length-1 literal visits {reserve_schedule(1, 7)}")

    fig, ax = plt.subplots(figsize=(10, 5))
    x = np.arange(len(steps))
    ax.bar(x - 0.2, [s[1] for s in steps], 0.4, label="length",
           color=COLORS["blue"], edgecolor="white")
    ax.bar(x + 0.2, [s[2] for s in steps], 0.4, label="capacity",
           color=COLORS["orange"], edgecolor="white")
    ax.set_xticks(x)
    ax.set_xticklabels([s[0] for s in steps], rotation=20, fontsize=8)
    ax.set_title("Length and Capacity Through a Sequence of Operations", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_capacity_control.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_capacity_control.png")


# ---------------------------------------------------------------------------
# Example 4: Timing
# ---------------------------------------------------------------------------
def example_4_timing():
    """push_back against list.append, and front insert against back insert."""
    print("\n" + "=" * 60)
    print("Example 4: Timing")
    print("=" * 60)

    sizes = [100, 1000, 5000]
    push_ms, append_ms, front_ms = [], [], []

    print(f"\n  {'N':>8} {'push_back (ms)':>16} {'list.append (ms)':>18} {'insert(0) (ms)':>16}")
    print(f"  {'-'*62}")
    for n in sizes:
        values = np.random.randint(0, 1000, size=n).tolist()

        seq = GrowableSequence()
        t0 = time.perf_counter()
        for v in values:
            seq.push_back(v)
        push_ms.append((time.perf_counter() - t0) * 1000)

        lst = []
        t0 = time.perf_counter()
        for v in values:
            lst.append(v)
        append_ms.append((time.perf_counter() - t0) * 1000)

        seq = GrowableSequence()
        t0 = time.perf_counter()
        for v in values:
            seq.insert(0, v)
        front_ms.append((time.perf_counter() - t0) * 1000)

        print(f"  {n:>8} {push_ms[-1]:>16.2f} {append_ms[-1]:>18.2f} {front_ms[-1]:>16.2f}")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(sizes, push_ms, "o-", color=COLORS["blue"], label="push_back")
    ax.plot(sizes, append_ms, "o-", color=COLORS["green"], label="list.append")
    ax.plot(sizes, front_ms, "o-", color=COLORS["red"], label="insert(0, v)")
    ax.set_xlabel("Elements")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Tail vs Front Insertion\nO(1) amortized vs O(n) per call", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_timing.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_timing.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Title page, summary numbers, then one page per visualization."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.7, "Growable Sequence", ha="center", fontsize=24, fontweight="bold")
        fig.text(0.5, 0.62, "Doubling growth and explicit capacity control",
                 ha="center", fontsize=14)
        s = summarize(N_PUSHES)
        lines = [
            f"Pushes: {s['n_pushes']}",
            f"Final capacity: {s['final_capacity']}",
            f"Reallocations: {s['reallocations']}",
            f"Total copies: {s['total_copies']}",
            f"Copies per push: {s['amortized_cost']:.3f}",
            f"Worst unused fraction: {s['max_slack']:.3f}",
        ]
        for i, line in enumerate(lines):
            fig.text(0.5, 0.5 - i * 0.04, line, ha="center", fontsize=12)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_capacity_growth.png": "Example 1: Capacity Growth",
            "02_amortized_cost.png": "Example 2: Amortized Copy Cost",
            "03_capacity_control.png": "Example 3: Explicit Capacity Control",
            "04_timing.png": "Example 4: Timing",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Growable Sequence Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Pushes per trace: {N_PUSHES}")
    print()

    example_1_capacity_growth()
    example_2_amortized_cost()
    example_3_capacity_control()
    example_4_timing()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
