from __future__ import annotations

import random
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from PIL import Image, ImageTk

from .encoders import encode_rgba
from .errors import IdenticonError
from .generator import IdenticonMeta, render
from .options import HashAlgorithm, IdenticonOptions

EXAMPLES = [
    "identicon",
    "alice@example.org",
    "bob@example.org",
    "ssh-ed25519-demo",
    "build-bot",
    "hello world",
]

SIZE_PRESETS = [32, 64, 128, 256, 512]


class App(tk.Tk):
    def __init__(self) -> None:
        super().__init__()
        self.title("hashicon")
        self.minsize(720, 560)

        style = ttk.Style(self)
        if "clam" in style.theme_names():
            style.theme_use("clam")
        style.configure("Header.TLabel", font=("Segoe UI", 18, "bold"))
        style.configure("Sub.TLabel", font=("Segoe UI", 10))
        style.configure("Mono.TLabel", font=("Consolas", 10))
        style.configure("TButton", padding=8)

        self.base_img: Optional[Image.Image] = None
        self.tk_img: Optional[ImageTk.PhotoImage] = None
        self.opts: Optional[IdenticonOptions] = None
        self.buf: Optional[bytearray] = None
        self.meta: Optional[IdenticonMeta] = None

        self.alg_var = tk.StringVar(value="md5")
        self.size_var = tk.StringVar(value="64")
        self.transparent_var = tk.BooleanVar(value=True)
        self.stroke_var = tk.BooleanVar(value=True)
        self.zoom_var = tk.IntVar(value=4)

        self._build_ui()

    def _build_ui(self) -> None:
        root = ttk.Frame(self, padding=16)
        root.pack(fill=tk.BOTH, expand=True)

        ttk.Label(root, text="hashicon", style="Header.TLabel").pack(anchor="w")
        ttk.Label(root, text="Same string + salt + algorithm -> same 5x5 identicon.",
                  style="Sub.TLabel").pack(anchor="w", pady=(6, 14))

        row = ttk.Frame(root)
        row.pack(fill=tk.X)
        ttk.Label(row, text="Text:").pack(side=tk.LEFT)
        self.text_entry = ttk.Entry(row)
        self.text_entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(10, 10))
        ttk.Label(row, text="Salt:").pack(side=tk.LEFT)
        self.salt_entry = ttk.Entry(row, width=16)
        self.salt_entry.pack(side=tk.LEFT, padx=(10, 10))
        ttk.Button(row, text="Example", command=self.on_example).pack(side=tk.LEFT, padx=(0, 8))
        ttk.Button(row, text="Generate", command=self.on_generate).pack(side=tk.LEFT)
        self.text_entry.bind("<Return>", lambda _e: self.on_generate())

        opts = ttk.Frame(root)
        opts.pack(fill=tk.X, pady=(10, 10))
        ttk.Label(opts, text="Hash:", style="Sub.TLabel").pack(side=tk.LEFT)
        ttk.Combobox(opts, textvariable=self.alg_var, state="readonly", width=8,
                     values=[a.hashlib_name for a in HashAlgorithm]).pack(side=tk.LEFT, padx=(8, 16))
        ttk.Label(opts, text="Size:", style="Sub.TLabel").pack(side=tk.LEFT)
        ttk.Combobox(opts, textvariable=self.size_var, state="readonly", width=6,
                     values=[str(s) for s in SIZE_PRESETS]).pack(side=tk.LEFT, padx=(8, 16))
        ttk.Checkbutton(opts, text="Transparent", variable=self.transparent_var).pack(side=tk.LEFT, padx=(0, 8))
        ttk.Checkbutton(opts, text="Stroke", variable=self.stroke_var).pack(side=tk.LEFT)

        self.meta_label = ttk.Label(root, text="—", style="Mono.TLabel")
        self.meta_label.pack(fill=tk.X, pady=(0, 10))

        ctrl = ttk.Frame(root)
        ctrl.pack(fill=tk.X, pady=(0, 10))
        ttk.Label(ctrl, text="Zoom:", style="Sub.TLabel").pack(side=tk.LEFT)
        self.zoom_label = ttk.Label(ctrl, text=f"{self.zoom_var.get()}×", style="Sub.TLabel")
        self.zoom_label.pack(side=tk.RIGHT, padx=(0, 12))
        ttk.Button(ctrl, text="Save PNG", command=self.on_save).pack(side=tk.RIGHT)
        self.zoom_scale = ttk.Scale(ctrl, from_=1, to=16, orient=tk.HORIZONTAL, command=self._on_zoom)
        self.zoom_scale.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(10, 10))
        self.zoom_scale.set(self.zoom_var.get())

        # checkerboard-ish grey so transparent cells are visible
        self.canvas = tk.Canvas(root, bg="#d8dbe0", highlightthickness=1, highlightbackground="#c0c4ca")
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", lambda _e: self._render())

    def _options(self) -> IdenticonOptions:
        return IdenticonOptions(
            text=self.text_entry.get(),
            salt=self.salt_entry.get(),
            size=int(self.size_var.get()),
            transparent=self.transparent_var.get(),
            stroke=self.stroke_var.get(),
            hash_algorithm=HashAlgorithm.parse(self.alg_var.get(), strict=True),
        )

    def on_example(self) -> None:
        self.text_entry.delete(0, tk.END)
        self.text_entry.insert(0, random.choice(EXAMPLES))
        self.on_generate()

    def on_generate(self) -> None:
        try:
            opts = self._options()
            buf, meta = render(opts)
        except IdenticonError as e:
            messagebox.showerror("Generation failed", str(e))
            return

        self.opts, self.meta, self.buf = opts, meta, buf
        self.base_img = Image.frombytes("RGBA", (opts.size, opts.size), bytes(buf))

        r, g, b = meta.foreground
        self.meta_label.config(
            text=f"{meta.algorithm.upper()}  #{r:02x}{g:02x}{b:02x}  cells={len(meta.cells)}  "
                 f"digest={meta.digest_hex[:24]}…"
        )
        self._render()

    def _on_zoom(self, val: str) -> None:
        if not hasattr(self, "zoom_label"):
            return
        self.zoom_var.set(int(float(val)))
        self.zoom_label.config(text=f"{self.zoom_var.get()}×")
        self._render()

    def _render(self) -> None:
        if self.base_img is None:
            return

        z = max(1, int(self.zoom_var.get()))
        w, h = self.base_img.size
        scaled = self.base_img.resize((w * z, h * z), resample=Image.NEAREST)
        self.tk_img = ImageTk.PhotoImage(scaled)

        self.canvas.delete("all")
        cw = max(1, self.canvas.winfo_width())
        ch = max(1, self.canvas.winfo_height())
        self.canvas.create_image(max(0, (cw - w * z) // 2), max(0, (ch - h * z) // 2),
                                 anchor="nw", image=self.tk_img)

    def on_save(self) -> None:
        if self.buf is None or self.opts is None or self.meta is None:
            messagebox.showinfo("Nothing to save", "Press Generate first.")
            return

        path = filedialog.asksaveasfilename(
            title="Save PNG",
            initialfile=f"identicon_{self.meta.digest_hex[:8]}.png",
            defaultextension=".png",
            filetypes=[("PNG image", "*.png")],
        )
        if not path:
            return

        try:
            encode_rgba(path, self.buf, self.opts.size, self.opts.size)
        except IdenticonError as e:
            messagebox.showerror("Save failed", str(e))
            return

        messagebox.showinfo("Saved", f"Saved:\n{path}")


def main() -> None:
    App().mainloop()


if __name__ == "__main__":
    main()
