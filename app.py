# app.py
# CustomTkinter GUI for the line editor (dark theme).
# - One editing session per window.
# - Command entry using the same one-letter grammar as the REPL.
# - Line view with the cursor drawn as "|", plus an event log pane.

from __future__ import annotations
from typing import Optional

import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (package installed, or PYTHONPATH=src)
import frontend as editor
from backend import config as CFG
from backend.models import CommandResult, Snapshot


# -------------------- small helpers --------------------

def render_line(snap: Snapshot) -> str:
    """Text with a '|' marker at the cursor."""
    p = snap.cursor_position
    return snap.text[:p] + "|" + snap.text[p:]


# -------------------- main app --------------------

class LineEditorApp(ctk.CTk):
    """Dark-themed GUI that drives a single editor session."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Line Editor")
        self.geometry("820x520")
        self.minsize(640, 420)

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=15)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_line_view()
        self._build_command_bar()
        self._build_log()

        editor.initialize()
        self._refresh(editor.snapshot())
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Line Editor", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

        self.lbl_status = ctk.CTkLabel(header, text="Cursor Position: 0", anchor="e", font=self.font_label)
        self.lbl_status.grid(row=0, column=1, sticky="e", padx=12, pady=10)

    def _build_line_view(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)

        self.lbl_line = ctk.CTkLabel(frame, text="|", anchor="w", font=self.font_mono)
        self.lbl_line.grid(row=0, column=0, sticky="ew", padx=12, pady=14)

    def _build_command_bar(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text=CFG.PROMPT.strip(), font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        self.entry_cmd = ctk.CTkEntry(box, placeholder_text="i x · d · l · r · s pattern replacement · q")
        self.entry_cmd.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)
        self.entry_cmd.bind("<Return>", self._on_enter)

        for col, (label, cmd) in enumerate((("←", CFG.CMD_LEFT), ("→", CFG.CMD_RIGHT), ("Del", CFG.CMD_DELETE)), start=2):
            btn = ctk.CTkButton(box, text=label, width=48, command=lambda c=cmd: self._run(c))
            btn.grid(row=0, column=col, padx=(0, 6), pady=10)

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log(CFG.WELCOME)
        for line in CFG.HELP_LINES:
            self._log(line)

    # --------- commands ---------

    def _on_enter(self, _ev=None) -> None:
        line = self.entry_cmd.get()
        self.entry_cmd.delete(0, "end")
        self._run(line)

    def _run(self, line: str) -> None:
        res: Optional[CommandResult] = editor.execute(line)
        if res is None:
            return
        if res.quit:
            self._on_close()
            return
        self._log(f"> {line}")
        if not res.ok:
            self._log(f"ERROR: {res.message}")
        self._refresh(res.snapshot)

    # --------- misc UI helpers ---------

    def _refresh(self, snap: Snapshot) -> None:
        self.lbl_line.configure(text=render_line(snap))
        self.lbl_status.configure(text=f"Cursor Position: {snap.cursor_position}")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        if mb.askokcancel("Quit", CFG.GOODBYE):
            try:
                editor.shutdown()
            finally:
                self.destroy()


if __name__ == "__main__":
    app = LineEditorApp()
    app.mainloop()
