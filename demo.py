"""
Binary Heap Demo -- Worked scenarios, comparison counts against log2(n),
and heap sort timing against the builtin sorted().

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
from binary_heap import BinaryHeap, MinHeap, MaxHeap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

SIZES = [2 ** k for k in range(4, 15)]


class CountingComparator:
    def __init__(self, compare):
        self.compare = compare
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.compare(a, b)


def example_1_scenarios():
    """Min and max heaps fed [4, 2, 9, 11] with an insert mid-drain."""
    print("=" * 60)
    print("Example 1: Min-Heap and Max-Heap Scenarios")
    print("=" * 60)

    for label, heap in (("min", MinHeap.new()), ("max", MaxHeap.new())):
        for v in [4, 2, 9, 11]:
            heap.add(v)
        order = [heap.extract_top() for _ in range(3)]
        heap.add(1)
        order.extend(heap)
        print(f"{label}-heap extraction order: {order}")
        print(f"  empty afterwards: {heap.is_empty()}, extract -> {heap.extract_top()}")


def example_2_comparison_counts():
    """Average comparisons per add / extract_top grow like log2(n)."""
    print("\n" + "=" * 60)
    print("Example 2: Comparisons per Operation")
    print("=" * 60)

    add_costs = []
    extract_costs = []
    for n in SIZES:
        comparator = CountingComparator(lambda a, b: a < b)
        heap = BinaryHeap(comparator)
        for v in np.random.randint(0, 10 * n, size=n):
            heap.add(int(v))
        add_costs.append(comparator.calls / n)

        comparator.calls = 0
        while heap:
            heap.extract_top()
        extract_costs.append(comparator.calls / n)
        print(f"n={n:6d}: add {add_costs[-1]:6.2f}  extract {extract_costs[-1]:6.2f}  "
              f"log2(n) {np.log2(n):5.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(SIZES, add_costs, "o-", color=COLORS["blue"], linewidth=2, label="add")
    ax.plot(SIZES, extract_costs, "s-", color=COLORS["red"], linewidth=2, label="extract_top")
    ax.plot(SIZES, 2 * np.log2(SIZES), "--", color=COLORS["dark"], label="2 log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparisons per operation")
    ax.set_title("Binary Heap Comparison Counts")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_comparison_counts.png", dpi=150)
    plt.close(fig)

    return fig, (add_costs, extract_costs)


def example_3_heap_sort_timing():
    """Drain a heap as a sort and check it against sorted()."""
    print("\n" + "=" * 60)
    print("Example 3: Heap Sort vs sorted()")
    print("=" * 60)

    heap_times = []
    builtin_times = []
    for n in SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()

        start = time.perf_counter()
        heap = BinaryHeap.new_min()
        for v in values:
            heap.add(v)
        drained = list(heap)
        heap_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        expected = sorted(values)
        builtin_times.append(time.perf_counter() - start)

        match = "OK" if drained == expected else "MISMATCH"
        print(f"n={n:6d}: heap {heap_times[-1] * 1e3:8.3f} ms  "
              f"sorted {builtin_times[-1] * 1e3:8.3f} ms  [{match}]")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(SIZES, heap_times, "o-", color=COLORS["green"], linewidth=2, label="BinaryHeap drain")
    ax.loglog(SIZES, builtin_times, "s-", color=COLORS["blue"], linewidth=2, label="sorted()")
    ax.set_xlabel("Number of elements")
    ax.set_ylabel("Seconds")
    ax.set_title("Heap Sort Timing")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_heap_sort_timing.png", dpi=150)
    plt.close(fig)

    return fig, (heap_times, builtin_times)


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Heap", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Comparator-Driven Implementation", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, fig in figures_data:
            fig.suptitle(title)
            pdf.savefig(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 22 + "BINARY HEAP DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}\n")

    example_1_scenarios()

    figures = []
    fig2, _ = example_2_comparison_counts()
    figures.append(("Example 2: Comparison Counts", fig2))

    fig3, _ = example_3_heap_sort_timing()
    figures.append(("Example 3: Heap Sort Timing", fig3))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
