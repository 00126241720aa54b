from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np


class Visualizer:
    """Before/after plots for --show. Nothing is displayed unless show=True."""

    @staticmethod
    def show_side_by_side(
        images: Sequence[np.ndarray],
        titles: Optional[Sequence[str]] = None,
        panel_size: float = 6.0,
        show: bool = True,
    ) -> plt.Figure:
        n = len(images)
        titles = titles or [f"Panel {i+1}" for i in range(n)]

        fig, axes = plt.subplots(1, n, figsize=(panel_size * n, panel_size), squeeze=False)
        for ax, img, title in zip(axes[0], images, titles):
            ax.imshow(img)
            ax.set_title(title)
            ax.axis("off")

        fig.tight_layout()
        if show:
            plt.show()
        return fig

    @staticmethod
    def panels(result) -> List[Tuple[str, np.ndarray]]:
        """Source, the pre-blur mask when the variant blurs, and the written map."""
        name = result.config.name
        out = [("Source", result.source)]
        if result.config.blurred:
            out.append((f"Mask ({name})", result.mask))
            out.append((f"Blurred, sigma {result.config.blur_sigma} ({name})", result.output))
        else:
            out.append((f"Emissive ({name})", result.output))
        return out

    def preview(self, result, show: bool = True) -> plt.Figure:
        titles, images = zip(*self.panels(result))
        return self.show_side_by_side(list(images), list(titles), show=show)
