import sys
import pandas as pd
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from functions import FunctionKind, construct
from integral_core import SumType, describe, integrate

# ---- Config: canonical problem and sample counts to compare ----
COEFFICIENTS = [0, 0, 2]
LOWER, UPPER = 0.0, 1.0
N_VALUES = [2 ** k for k in range(1, 17)]

OUT_PNG = "riemann_convergence.png"


def convergence_frame(function, lower: float, upper: float, n_values):
    """Left and right Riemann sums of `function` for each sample count."""
    rows = []
    for n in n_values:
        left = integrate(lower, upper, function, n, SumType.LEFT)
        right = integrate(lower, upper, function, n, SumType.RIGHT)
        rows.append({"n": n, "left": left, "right": right})

    df = pd.DataFrame(rows, columns=["n", "left", "right"])
    df["gap"] = (df["right"] - df["left"]).abs()
    return df


def plot(df, title: str, out_png: str = OUT_PNG):
    fig, ax = plt.subplots()
    ax.plot(df["n"], df["left"], marker="o", label="left")
    ax.plot(df["n"], df["right"], marker="o", label="right")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("number of rectangles (n)")
    ax.set_ylabel("Riemann sum")
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    fig.savefig(out_png, dpi=200)
    plt.close(fig)
    return out_png


def main():
    polynomial = construct(FunctionKind.POLYNOMIAL, len(COEFFICIENTS) - 1, COEFFICIENTS)
    if not polynomial:
        print(f"❌ Cannot build polynomial: {polynomial.reason}")
        sys.exit(1)

    with polynomial:
        df = convergence_frame(polynomial, LOWER, UPPER, N_VALUES)
        title = f"Riemann sums of {describe(polynomial)} on [{LOWER:g}, {UPPER:g}]"

    print(df.to_string(index=False))
    plot(df, title)
    print(f"✅ Saved plot: {OUT_PNG}")


if __name__ == "__main__":
    main()
