import matplotlib.pyplot as plt
import numpy as np

from .logger import SymbolFrequencyLog, SymbolCodeLog


class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.7,
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        # mode='same' returns max(len(data), window) points
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _plot_graph(self, x_values, y_values, title, xlabel, ylabel, show_graph=False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return False

        x = np.array(x_values)
        y = np.array(y_values, dtype=np.float64)
        trend = self._moving_average(y)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.bar(x, y, alpha=self.bar_alpha, color=self.bar_color, label="Symbols")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")

        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()
        return True

    def generate_symbol_frequency_plot(self, show_graphs=False, save_path=None):
        logs = sorted((log for log in self.logs if isinstance(log, SymbolFrequencyLog)), key=lambda log: log.symbol)
        return self._plot_graph([log.symbol for log in logs], [log.count for log in logs],
                                "Symbol Frequency", "Symbol", "Count", show_graphs, save_path)

    def generate_code_length_plot(self, show_graphs=False, save_path=None):
        logs = sorted((log for log in self.logs if isinstance(log, SymbolCodeLog)), key=lambda log: log.symbol)
        return self._plot_graph([log.symbol for log in logs], [log.code.length for log in logs],
                                "Code Length", "Symbol", "Bits", show_graphs, save_path)
