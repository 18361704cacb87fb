import matplotlib.pyplot as plt
import numpy as np

from .models import DEFAULT_LAYOUT

class PatternDisplay:
    def __init__(self, data, layout=DEFAULT_LAYOUT,
                 fig_size=(6, 10), dpi=100, font_size=12,
                 color_map='gray'):
        if not data:
            raise ValueError("No pattern data to display")
        self.data = data
        self.layout = layout
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.color_map = color_map

    def _to_rows(self):
        values = np.frombuffer(self.data, dtype=np.uint8)
        row_size = self.layout.row_size
        # pad a partial last row with zeros
        padding = (-len(values)) % row_size
        if padding:
            values = np.concatenate([values, np.zeros(padding, dtype=np.uint8)])
        return values.reshape(-1, row_size)

    def plot_track(self, title="Pattern", show_graph=False, save_path=None):
        rows = self._to_rows()

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.imshow(rows, cmap=self.color_map, vmin=0, vmax=255, aspect='auto', interpolation='nearest')

        # mark sector boundaries
        for sector in range(1, self.layout.sectors):
            boundary = sector * self.layout.rows_per_sector - 0.5
            if boundary < rows.shape[0]:
                plt.axhline(boundary, color='red', linewidth=0.5)

        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel("Position in row", fontsize=self.font_size)
        plt.ylabel("Row", fontsize=self.font_size)
        plt.colorbar(label="Byte value")
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()
        return rows
