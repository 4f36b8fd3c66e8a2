from .plots import plot_fit, plot_learning_curve

__all__ = ["plot_fit", "plot_learning_curve"]
