"""
Priority Queue Demo -- Heap sort with both heaps, operation cost scaling,
pairing-heap fan-out under consolidation, binary-heap array layout, and
persistent snapshots.

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
import pairing_heap as ph
from binary_heap import BinaryHeap, CapacityExceeded
from ordering import REVERSED

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [100, 250, 500, 1000, 2500, 5000, 10000]

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def _binary_heap_sort(values):
    heap = BinaryHeap(len(values))
    for v in values:
        heap.insert(v)
    return [heap.pop() for _ in range(len(values))]


def _pairing_heap_sort(values):
    h = ph.from_iterable(values)
    out = []
    while not ph.is_empty(h):
        out.append(ph.peek(h))
        h = ph.pop(h)
    return out


# ---------------------------------------------------------------------------
# Example 1: Heap Sort With Both Heaps
# ---------------------------------------------------------------------------
def example_1_heap_sort():
    """Sort the same data with each heap and check both against sorted()."""
    print("=" * 60)
    print("Example 1: Heap Sort With Both Heaps")
    print("=" * 60)

    values = np.random.randint(0, 100, size=20).tolist()
    descending = _binary_heap_sort(values)
    ascending = _pairing_heap_sort(values)

    print(f"\n  Input:              {values}")
    print(f"  Binary heap (max):  {descending}")
    print(f"  Pairing heap (min): {ascending}")
    assert descending == sorted(values, reverse=True)
    assert ascending == sorted(values)
    print("  Both match sorted()")

    fig, axes = plt.subplots(1, 3, figsize=(16, 4.5))
    x = np.arange(len(values))
    axes[0].bar(x, values, color=COLORS["dark"])
    axes[0].set_title("Input Order", fontsize=10, fontweight="bold")
    axes[1].bar(x, descending, color=COLORS["blue"])
    axes[1].set_title("BinaryHeap pops (max-ordered)", fontsize=10, fontweight="bold")
    axes[2].bar(x, ascending, color=COLORS["green"])
    axes[2].set_title("PairingHeap pops (min-ordered)", fontsize=10, fontweight="bold")
    for ax in axes:
        ax.set_xlabel("Position")
        ax.grid(True, alpha=0.3, axis="y")
    axes[0].set_ylabel("Value")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_heap_sort.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 2: Operation Cost Scaling
# ---------------------------------------------------------------------------
def example_2_scaling():
    """Time n inserts followed by n pops for each structure."""
    print("\n" + "=" * 60)
    print("Example 2: Operation Cost Scaling")
    print("=" * 60)

    binary_times = []
    pairing_times = []
    builtin_times = []
    for n in SIZES:
        values = np.random.rand(n).tolist()

        start = time.perf_counter()
        _binary_heap_sort(values)
        binary_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        _pairing_heap_sort(values)
        pairing_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        sorted(values)
        builtin_times.append(time.perf_counter() - start)

        print(f"  n={n:>6}: binary={binary_times[-1] * 1e3:8.2f} ms  "
              f"pairing={pairing_times[-1] * 1e3:8.2f} ms  "
              f"sorted={builtin_times[-1] * 1e3:6.2f} ms")

    sizes = np.array(SIZES, dtype=float)
    nlogn = sizes * np.log2(sizes)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].loglog(sizes, binary_times, "o-", color=COLORS["blue"], label="BinaryHeap")
    axes[0].loglog(sizes, pairing_times, "s-", color=COLORS["green"], label="PairingHeap")
    axes[0].loglog(sizes, builtin_times, "^-", color=COLORS["orange"], label="sorted()")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Seconds (n inserts + n pops)")
    axes[0].set_title("Heap Sort Wall Time", fontsize=10, fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3, which="both")

    axes[1].plot(sizes, np.array(binary_times) / nlogn * 1e9, "o-",
                 color=COLORS["blue"], label="BinaryHeap")
    axes[1].plot(sizes, np.array(pairing_times) / nlogn * 1e9, "s-",
                 color=COLORS["green"], label="PairingHeap")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("ns per (n log n)")
    axes[1].set_title("Normalized Cost\nFlat line means O(n log n)", fontsize=10, fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_scaling.png", dpi=150)
    plt.close(fig)

    return fig, (binary_times, pairing_times, builtin_times)


# ---------------------------------------------------------------------------
# Example 3: Pairing Heap Fan-out Under Consolidation
# ---------------------------------------------------------------------------
def example_3_fanout():
    """Track the root's child count as elements are popped."""
    print("\n" + "=" * 60)
    print("Example 3: Pairing Heap Fan-out Under Consolidation")
    print("=" * 60)

    n = 512
    patterns = {
        "ascending": list(range(n)),
        "descending": list(range(n, 0, -1)),
        "random": np.random.permutation(n).tolist(),
    }
    colors = [COLORS["blue"], COLORS["red"], COLORS["purple"]]

    fig, ax = plt.subplots(figsize=(10, 5))
    for (name, values), color in zip(patterns.items(), colors):
        h = ph.from_iterable(values)
        fanout = []
        while not ph.is_empty(h):
            fanout.append(sum(1 for _ in ph.children(h)))
            h = ph.pop(h)
        print(f"  {name:>10}: root children after build = {fanout[0]:4d}, "
              f"mean over pops = {np.mean(fanout):6.2f}")
        ax.plot(fanout, color=color, linewidth=1.2, label=name)

    ax.set_yscale("symlog")
    ax.set_xlabel("Pop number")
    ax.set_ylabel("Root child count")
    ax.set_title("Root Fan-out Before Each Pop\nFirst pop pays for the inserts, later pops stay shallow",
                 fontsize=10, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_fanout.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 4: Binary Heap Array Layout
# ---------------------------------------------------------------------------
def example_4_array_layout():
    """Show the 1-based array with each tree level coloured, max and min."""
    print("\n" + "=" * 60)
    print("Example 4: Binary Heap Array Layout")
    print("=" * 60)

    values = np.random.randint(1, 100, size=15).tolist()
    max_heap = BinaryHeap.from_array(values)
    min_heap = BinaryHeap.from_array(values, ordering=REVERSED)

    level_colors = [COLORS["dark"], COLORS["blue"], COLORS["green"], COLORS["orange"]]
    fig, axes = plt.subplots(2, 1, figsize=(12, 7))
    for ax, heap, title in [(axes[0], max_heap, "Max heap"), (axes[1], min_heap, "Min heap")]:
        layout = heap._data[1:heap.size() + 1]
        positions = np.arange(1, len(layout) + 1)
        levels = np.floor(np.log2(positions)).astype(int)
        ax.bar(positions, layout, color=[level_colors[lv % len(level_colors)] for lv in levels],
               edgecolor="white")
        ax.set_xticks(positions)
        ax.set_xlabel("Logical position i (parent = i // 2)")
        ax.set_ylabel("Value")
        ax.set_title(f"{title}: valid={heap._validate()}", fontsize=10, fontweight="bold")
        ax.grid(True, alpha=0.3, axis="y")
        print(f"  {title}: {layout}")

    heap = BinaryHeap(3)
    for v in [1, 2, 3]:
        heap.insert(v)
    try:
        heap.insert(4)
    except CapacityExceeded as exc:
        print(f"  Full heap rejected insert: {exc}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_array_layout.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 5: Persistent Snapshots
# ---------------------------------------------------------------------------
def example_5_persistence():
    """Keep every intermediate pairing heap and show none of them change."""
    print("\n" + "=" * 60)
    print("Example 5: Persistent Snapshots")
    print("=" * 60)

    h1 = ph.insert(ph.empty(), 5)
    h2 = ph.insert(h1, 3)
    print(f"  peek(h1) = {ph.peek(h1)}, peek(h2) = {ph.peek(h2)}")

    values = np.random.randint(0, 1000, size=40).tolist()
    h = ph.empty()
    snapshots = []
    for v in values:
        h = ph.insert(h, v)
        snapshots.append(h)
    for _ in range(20):
        h = ph.pop(h)

    snapshot_sizes = [ph.size(s) for s in snapshots]
    snapshot_mins = [ph.peek(s) for s in snapshots]
    running_min = np.minimum.accumulate(values).tolist()
    assert snapshot_mins == running_min
    print(f"  {len(snapshots)} snapshots intact after 20 pops on the latest heap")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(snapshot_sizes, "o-", color=COLORS["purple"], markersize=3)
    axes[0].set_xlabel("Snapshot")
    axes[0].set_ylabel("Size")
    axes[0].set_title("Snapshot Sizes After Later Pops", fontsize=10, fontweight="bold")
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(values, ".", color=COLORS["dark"], alpha=0.5, label="inserted value")
    axes[1].step(range(len(snapshot_mins)), snapshot_mins, where="post",
                 color=COLORS["green"], linewidth=2, label="peek(snapshot)")
    axes[1].set_xlabel("Insert number")
    axes[1].set_ylabel("Value")
    axes[1].set_title("Each Snapshot Keeps Its Own Minimum", fontsize=10, fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_persistence.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Priority Queues", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Binary Heap and Persistent Pairing Heap", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / filename))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "PRIORITY QUEUE DEMO" + " " * 18 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_heap_sort()
    example_2_scaling()
    example_3_fanout()
    example_4_array_layout()
    example_5_persistence()

    generate_pdf_report([
        ("Example 1: Heap Sort", "01_heap_sort.png"),
        ("Example 2: Scaling", "02_scaling.png"),
        ("Example 3: Fan-out", "03_fanout.png"),
        ("Example 4: Array Layout", "04_array_layout.png"),
        ("Example 5: Persistence", "05_persistence.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
