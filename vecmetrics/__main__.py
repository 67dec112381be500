"""Experiments with the `vecmetrics` package."""

import logging

import vecmetrics

logging.basicConfig(
    format="%(asctime)s - %(name)-8s - %(levelname)-8s - %(message)s",
    datefmt="%d-%b-%y %H:%M:%S",
)
logger = logging.getLogger("vecmetrics")
logger.setLevel(logging.INFO)


def main() -> None:
    """Experiments with the `vecmetrics` package."""
    x, y = [2.0, 4.0], [5.0, 5.0]
    for name in ("manhattan", "euclidean", "minkowski", "chebyshev"):
        m = vecmetrics.metric.get(name)
        logger.info(f"{m}({x}, {y}) = {m(x, y)}")

    x = [3.5, 2.0, 5.0, 1.5, 2.0]
    y = [2.0, 3.5, 2.0, 3.5, 3.0]
    logger.info(f"pearson({x}, {y}) = {vecmetrics.pearson(x, y)}")


if __name__ == "__main__":
    main()
