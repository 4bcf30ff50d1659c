"""Desktop shell: load an image, sort its pixels, save the result."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from .codec import load_raster, save_raster
from .config import Config, PixelSorterError
from .raster import Raster
from .sort import process

logger = logging.getLogger("pixel_sorter")

IMAGE_FILE_TYPES = [
    ("Image Files", "*.png *.jpg *.jpeg *.bmp"),
    ("All Files", "*.*"),
]


@dataclass
class ShellState:
    """Which shell actions are currently available."""

    can_sort: bool = False
    can_save: bool = False

    def reset(self) -> None:
        self.can_sort = False
        self.can_save = False

    def image_loaded(self) -> None:
        self.can_sort = True
        self.can_save = False

    def load_failed(self) -> None:
        self.reset()

    def image_sorted(self) -> None:
        self.can_save = True

    def sort_failed(self) -> None:
        self.can_save = False


def fit_for_display(img: Image.Image, max_width: int, max_height: int) -> Image.Image:
    """Scale an image to fit the display area, keeping its aspect ratio."""
    width, height = img.size
    factor = min(max_width / width, max_height / height)
    new_size = (max(1, int(width * factor)), max(1, int(height * factor)))
    return img.resize(new_size, Image.Resampling.NEAREST)


class PixelSorterApp:
    DISPLAY_WIDTH = 600
    DISPLAY_HEIGHT = 400

    def __init__(self, config: Optional[Config] = None):
        import tkinter as tk
        from tkinter import ttk

        self.config = config or Config()
        self.state = ShellState()
        self.raster: Optional[Raster] = None
        self.photo = None

        self.root = tk.Tk()
        self.root.title("Image Pixel Sorter")
        self.root.geometry("800x500")

        main = ttk.Frame(self.root, padding=10)
        main.pack(fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(
            main, width=self.DISPLAY_WIDTH, height=self.DISPLAY_HEIGHT, bg="#222"
        )
        self.canvas.pack(side=tk.LEFT, padx=(0, 10))

        ctrl = ttk.Frame(main)
        ctrl.pack(side=tk.LEFT, fill=tk.Y)
        self.btn_load = ttk.Button(ctrl, text="Load Image", command=self._on_load)
        self.btn_load.pack(fill=tk.X, pady=4)
        self.btn_sort = ttk.Button(ctrl, text="Sort Pixels", command=self._on_sort)
        self.btn_sort.pack(fill=tk.X, pady=4)
        self.btn_save = ttk.Button(ctrl, text="Save Image", command=self._on_save)
        self.btn_save.pack(fill=tk.X, pady=4)

        self._sync_buttons()

    def _sync_buttons(self) -> None:
        self.btn_sort.state(["!disabled"] if self.state.can_sort else ["disabled"])
        self.btn_save.state(["!disabled"] if self.state.can_save else ["disabled"])

    def _show(self, raster: Raster) -> None:
        from PIL import ImageTk

        img = fit_for_display(raster.to_image(), self.DISPLAY_WIDTH, self.DISPLAY_HEIGHT)
        self.photo = ImageTk.PhotoImage(img)
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor="nw", image=self.photo)

    def _on_load(self) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(
            parent=self.root, title="Open Image File", filetypes=IMAGE_FILE_TYPES
        )
        if not path:
            return
        try:
            self.raster = load_raster(path, self.config.max_dimension)
        except PixelSorterError as exc:
            logger.debug(f"Load failed: {exc}")
            self.raster = None
            self.state.load_failed()
            messagebox.showerror(
                "Error loading image",
                "Failed to load or process the image.",
                parent=self.root,
            )
        else:
            self._show(self.raster)
            self.state.image_loaded()
        self._sync_buttons()

    def _on_sort(self) -> None:
        from tkinter import messagebox

        try:
            self.raster = process(self.raster)
        except PixelSorterError as exc:
            logger.debug(f"Sort failed: {exc}")
            self.state.sort_failed()
            messagebox.showerror("Error", "Failed to sort the image.", parent=self.root)
        else:
            self._show(self.raster)
            self.state.image_sorted()
        self._sync_buttons()

    def _on_save(self) -> None:
        from tkinter import filedialog, messagebox

        directory = filedialog.askdirectory(parent=self.root)
        if not directory or self.raster is None:
            return
        try:
            save_raster(self.raster, directory, self.config.output_name)
        except PixelSorterError as exc:
            logger.debug(f"Save failed: {exc}")
            messagebox.showerror("Save Error", "Failed to save the image.", parent=self.root)
        else:
            messagebox.showinfo("Saved", "Image saved successfully!", parent=self.root)

    def run(self) -> None:
        self.root.mainloop()


def run_app(config: Optional[Config] = None) -> None:
    """Open the desktop window and block until it is closed."""
    PixelSorterApp(config).run()
