# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

from cp3d.counter import DistanceCounter
from cp3d.io import PointFormatError, parse_points, random_points
from cp3d.pipeline import closest_distance, closest_pairs
from cp3d.plot import plot_points

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'


def parse_points_from_text(text: str):
    """
    Текст з поля вводу -> список Pt.
    Кожен рядок: x y z (коми теж дозволені). Порожні рядки і # — пропускаємо.
    """
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(line.replace(",", " "))
    return parse_points([str(len(rows))] + rows)


class ClosestApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Closest pair in 3D")
        self.geometry("800x700")
        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(mode_frame, text="Випадкові точки", variable=self.input_mode,
                        value="random", command=self._update_mode_state
                        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(mode_frame, text="Ручне введення точок", variable=self.input_mode,
                        value="manual", command=self._update_mode_state
                        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        # --- Параметри для random-режиму ---
        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкових точок)")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість точок:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "200")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Розмір куба:").grid(row=0, column=2, sticky="w", padx=5, pady=5)
        self.high_entry = ttk.Entry(input_frame, width=10)
        self.high_entry.insert(0, "10000")
        self.high_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)

        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0 0\n3 4 0\n100 100 100\n")

        ttk.Button(main, text="Знайти найближчу пару", command=self.run).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.count_var = tk.StringVar(value="—")
        self.dist_var = tk.StringVar(value="—")
        self.evals_var = tk.StringVar(value="—")
        self.check_var = tk.StringVar(value="—")

        for row, (label, var) in enumerate([
            ("Точок:", self.count_var),
            ("Мінімальна відстань:", self.dist_var),
            ("Обчислень відстані:", self.evals_var),
            ("Перевірка (SciPy):", self.check_var),
        ]):
            ttk.Label(result_frame, text=label).grid(row=row, column=0, sticky="w", padx=5, pady=2)
            ttk.Label(result_frame, textvariable=var).grid(row=row, column=1, sticky="w", padx=5, pady=2)

        # --- Фрейм для 3D-графіка ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)
        self.high_entry.configure(state=state)

    def _read_points(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                high = int(self.high_entry.get())
                if n < 0 or high < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість і розмір мають бути невід’ємними цілими числами.")
                return None
            return random_points(n, high)

        raw_text = self.points_text.get("1.0", "end").strip()
        try:
            return parse_points_from_text(raw_text)
        except PointFormatError as e:
            messagebox.showerror("Помилка парсингу точок", str(e))
            return None

    def run(self):
        points = self._read_points()
        if points is None:
            return

        counter = DistanceCounter()
        d = closest_distance(points, backend="divide", counter=counter)

        self.count_var.set(str(len(points)))
        self.evals_var.set(str(counter.value))
        if d is None:
            self.dist_var.set("пари немає")
            self.check_var.set("—")
            plot_points(self.ax, points, title="Менше двох точок")
            self.canvas.draw()
            return

        self.dist_var.set(f"{d:.6g}")
        check = closest_distance(points, backend="scipy")
        self.check_var.set("OK" if abs(check - d) <= 1e-6 * max(d, 1.0) else f"розбіжність: {check:.6g}")

        pairs = closest_pairs(points, d)
        plot_points(self.ax, points, pairs, title=f"d = {d:.6g}")
        self.canvas.draw()


if __name__ == "__main__":
    app = ClosestApp()
    app.mainloop()
