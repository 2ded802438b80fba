"""
Desktop dialogs for the interactive flow: pick a file, pick a method,
report success or failure.
"""

from typing import Optional
from tkinter import Tk, Toplevel, Label, Button, filedialog, messagebox

from utils.image_utils import ImageUtils


def _hidden_root() -> Tk:
    root = Tk()
    root.withdraw()
    return root


def ask_image_path() -> Optional[str]:
    """Open a file chooser; returns None when cancelled."""
    root = _hidden_root()
    try:
        path = filedialog.askopenfilename(
            parent=root,
            title="Select an image to enhance",
            filetypes=[
                ("Images", " ".join(f"*{ext}" for ext in sorted(ImageUtils.SUPPORTED_EXTENSIONS))),
                ("All files", "*.*"),
            ],
        )
    finally:
        root.destroy()
    return path or None


def ask_method(options: dict) -> Optional[str]:
    """
    Show one button per method.

    Args:
        options: Mapping of method key to button label, in display order

    Returns:
        The chosen method key, or None if the dialog was closed
    """
    root = _hidden_root()
    choice = {"method": None}

    try:
        dialog = Toplevel(root)
        dialog.title("Enhancement Method")
        dialog.resizable(False, False)
        Label(dialog, text="Choose enhancement method:", padx=20, pady=10).pack()

        def choose(key):
            choice["method"] = key
            dialog.destroy()

        for key, label in options.items():
            Button(dialog, text=label, width=24, command=lambda k=key: choose(k)).pack(padx=20, pady=4)

        dialog.protocol("WM_DELETE_WINDOW", dialog.destroy)
        dialog.grab_set()
        root.wait_window(dialog)
    finally:
        root.destroy()
    return choice["method"]


def show_info(title: str, message: str) -> None:
    root = _hidden_root()
    try:
        messagebox.showinfo(title, message, parent=root)
    finally:
        root.destroy()


def show_error(message: str) -> None:
    root = _hidden_root()
    try:
        messagebox.showerror("Error", message, parent=root)
    finally:
        root.destroy()
