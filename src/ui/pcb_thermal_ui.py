"""
PCB Thermal Toolkit User Interface
==================================

Graphical user interface (GUI) for the PCB Thermal Toolkit calculators.

Features:
---------
- IPC-2221 trace width with resistance and I²R loss
- Copper resistance vs temperature
- Thermal via array vertical conduction
- Results recomputed on every edit
- Sweep plots with CSV export and a step-by-step calculation view
- Design notes and reference links

Usage:
------
    from src.ui.pcb_thermal_ui import PcbThermalUI

    app = PcbThermalUI()
    app.run()
"""

import math
import tkinter as tk
import webbrowser
from dataclasses import dataclass
from tkinter import ttk, messagebox, filedialog
from typing import Callable, Dict, Optional, Tuple
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

# Import matplotlib with TkAgg backend
import matplotlib
matplotlib.use('TkAgg')
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk
from matplotlib.figure import Figure

from src.pcb_thermal import (
    LayerKind,
    TraceWidthInput,
    ResistanceTempInput,
    ThermalViaInput,
    TraceWidthEngine,
    ResistanceTemperatureEngine,
    ThermalViaEngine,
    trace_trace_width,
    trace_resistance_vs_temp,
    trace_thermal_via,
    sweep_trace_current,
    sweep_resistance_temperature,
    sweep_via_count,
    export_sweep_csv,
    get_logger,
)
from src.pcb_thermal.formatting import (
    format_trace_width,
    format_resistance_vs_temp,
    format_thermal_via,
)
from src.pcb_thermal.plotting import plot_trace_sweep, plot_resistance_sweep, plot_via_sweep
from src.pcb_thermal.notes import DESIGN_NOTES, RESOURCES, FOOTER


logger = get_logger("ui")


def parse_number(text: str) -> float:
    """Parse a form field; text that is not a number becomes nan."""
    try:
        return float(text)
    except ValueError:
        return math.nan


@dataclass
class FieldSpec:
    """One form field: input attribute, label, unit suffix, optional choices."""
    name: str
    label: str
    unit: str = ""
    choices: Optional[Tuple[LayerKind, ...]] = None


TRACE_FIELDS = [
    FieldSpec("layer", "Layer", choices=(LayerKind.EXTERNAL, LayerKind.INTERNAL)),
    FieldSpec("current_a", "Current", "A"),
    FieldSpec("temp_rise_c", "Allowable dT", "°C"),
    FieldSpec("copper_oz", "Copper thickness", "oz"),
    FieldSpec("length_mm", "Trace length", "mm"),
    FieldSpec("ambient_c", "Ambient (estimate)", "°C"),
]

RESISTANCE_FIELDS = [
    FieldSpec("resistivity_20c", "ρ at 20°C", "Ω·m"),
    FieldSpec("temp_coefficient", "α (temp coeff)", "1/°C"),
    FieldSpec("temp1_c", "T1", "°C"),
    FieldSpec("temp2_c", "T2", "°C"),
    FieldSpec("length_mm", "Length", "mm"),
    FieldSpec("width_mm", "Width", "mm"),
    FieldSpec("thickness_mm", "Thickness", "mm"),
]

VIA_FIELDS = [
    FieldSpec("via_count", "Via count"),
    FieldSpec("hole_mm", "Finished hole (Di)", "mm"),
    FieldSpec("plating_mm", "Plating thickness", "mm"),
    FieldSpec("board_thickness_mm", "Board thickness", "mm"),
    FieldSpec("thermal_conductivity", "k of copper", "W/m·K"),
]


class CalculatorPanel:
    """
    One calculator tab: input form on the left, results notebook on the right.

    The panel rebuilds its input record from the form on every edit,
    recomputes, and refreshes the result text, plot and calculation steps.
    """

    FRAME_PADDING = 10
    WIDGET_PADDING = 3
    RECOMPUTE_DELAY_MS = 150

    def __init__(
        self,
        app: "PcbThermalUI",
        notebook: ttk.Notebook,
        title: str,
        fields: list,
        input_cls: type,
        engine,
        formatter: Callable,
        tracer: Callable,
        sweeper: Callable,
        plotter: Callable,
    ):
        self.app = app
        self.title = title
        self.fields = fields
        self.input_cls = input_cls
        self.engine = engine
        self.formatter = formatter
        self.tracer = tracer
        self.sweeper = sweeper
        self.plotter = plotter

        self.vars: Dict[str, tk.StringVar] = {}
        self._recompute_id = None

        self.frame = ttk.Frame(notebook, padding=self.FRAME_PADDING)
        notebook.add(self.frame, text=title)
        self.frame.columnconfigure(0, weight=0)
        self.frame.columnconfigure(1, weight=1)
        self.frame.rowconfigure(0, weight=1)

        self._create_input_form()
        self._create_results_notebook()

    # =========================================================================
    # Layout
    # =========================================================================

    def _create_input_form(self):
        """Create the labeled input fields."""
        form = ttk.LabelFrame(self.frame, text="Inputs", padding=self.FRAME_PADDING)
        form.grid(row=0, column=0, sticky="nsew", padx=(0, 5))

        defaults = self.input_cls()
        for row, spec in enumerate(self.fields):
            ttk.Label(form, text=f"{spec.label}:").grid(
                row=row, column=0, sticky="w", pady=self.WIDGET_PADDING
            )
            default = getattr(defaults, spec.name)

            if spec.choices:
                var = tk.StringVar(value=default.label)
                widget = ttk.Combobox(
                    form,
                    textvariable=var,
                    values=[choice.label for choice in spec.choices],
                    state="readonly",
                    width=12
                )
            else:
                var = tk.StringVar(value=f"{default:g}")
                widget = ttk.Entry(form, textvariable=var, width=14)
            widget.grid(row=row, column=1, sticky="w", padx=5, pady=self.WIDGET_PADDING)
            ttk.Label(form, text=spec.unit, foreground="gray").grid(row=row, column=2, sticky="w")

            var.trace_add("write", lambda *a: self.schedule_recompute())
            self.vars[spec.name] = var

        btn_frame = ttk.Frame(form)
        btn_frame.grid(row=len(self.fields), column=0, columnspan=3, sticky="ew", pady=(10, 0))
        ttk.Button(btn_frame, text="Reset Defaults", command=self.reset_defaults).pack(fill="x", pady=2)
        ttk.Button(btn_frame, text="Export Sweep CSV", command=self._export_sweep).pack(fill="x", pady=2)

    def _create_results_notebook(self):
        """Create results, plot and calculation-steps tabs."""
        results_notebook = ttk.Notebook(self.frame)
        results_notebook.grid(row=0, column=1, sticky="nsew", padx=(5, 0))

        # Results tab
        results_frame = ttk.Frame(results_notebook, padding=5)
        results_notebook.add(results_frame, text="Results")
        self.results_text = tk.Text(
            results_frame,
            height=22,
            width=55,
            state="disabled",
            font=("Courier", 10)
        )
        self.results_text.pack(fill="both", expand=True)

        # Plot tab
        plot_frame = ttk.Frame(results_notebook, padding=5)
        results_notebook.add(plot_frame, text="Plot")
        self.fig = Figure(figsize=(6, 4), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)
        toolbar_frame = ttk.Frame(plot_frame)
        toolbar_frame.pack(fill="x")
        toolbar = NavigationToolbar2Tk(self.canvas, toolbar_frame)
        toolbar.update()

        # Calculation steps tab
        steps_frame = ttk.Frame(results_notebook, padding=5)
        results_notebook.add(steps_frame, text="Calculation Steps")
        steps_scrollbar = ttk.Scrollbar(steps_frame)
        steps_scrollbar.pack(side="right", fill="y")
        self.steps_text = tk.Text(
            steps_frame,
            height=22,
            width=80,
            state="disabled",
            font=("Courier", 9),
            wrap="none",
            yscrollcommand=steps_scrollbar.set
        )
        self.steps_text.pack(side="left", fill="both", expand=True)
        steps_scrollbar.config(command=self.steps_text.yview)

    # =========================================================================
    # Inputs
    # =========================================================================

    def build_inputs(self):
        """Snapshot the form as an input record."""
        values = {}
        for spec in self.fields:
            text = self.vars[spec.name].get()
            if spec.choices:
                values[spec.name] = next(
                    (choice for choice in spec.choices if choice.label == text),
                    spec.choices[0]
                )
            else:
                values[spec.name] = parse_number(text)
        return self.input_cls(**values)

    def reset_defaults(self):
        """Restore the default input values."""
        defaults = self.input_cls()
        for spec in self.fields:
            value = getattr(defaults, spec.name)
            self.vars[spec.name].set(value.label if spec.choices else f"{value:g}")

    # =========================================================================
    # Recompute
    # =========================================================================

    def schedule_recompute(self):
        """Schedule a recompute (debounced)."""
        if self._recompute_id is not None:
            self.app.root.after_cancel(self._recompute_id)
        self._recompute_id = self.app.root.after(self.RECOMPUTE_DELAY_MS, self.recompute)

    def recompute(self):
        """Recompute and refresh every view of this calculator."""
        self._recompute_id = None
        inputs = self.build_inputs()
        result = self.engine.compute(inputs)

        self._set_text(self.results_text, self.formatter(inputs, result))
        self._set_text(self.steps_text, self.tracer(inputs, self.engine.config).get_report())
        self._plot(inputs, result)

        advisories = self.engine.advisories(inputs)
        if advisories:
            self.app.status_var.set(f"{self.title}: " + "; ".join(advisories))
        else:
            self.app.status_var.set(f"{self.title}: updated")

    def _plot(self, inputs, result):
        """Redraw the sweep plot around the current operating point."""
        try:
            sweep = self.sweeper(inputs, self.engine)
            self.fig.clf()
            ax = self.fig.add_subplot(111)
            self.plotter(ax, sweep, inputs, result)
            self.fig.tight_layout()
        except Exception as e:
            logger.exception("Plot failed for %s", self.title)
            self.fig.clf()
            self.fig.text(0.5, 0.5, f"Plot unavailable:\n{e}", ha="center", va="center")
        self.canvas.draw_idle()

    def _export_sweep(self):
        """Export the current sweep table to CSV."""
        filepath = filedialog.asksaveasfilename(
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
            title=f"Export {self.title} Sweep"
        )

        if filepath:
            try:
                sweep = self.sweeper(self.build_inputs(), self.engine)
                export_sweep_csv(sweep, filepath)
                messagebox.showinfo(
                    "Export Complete",
                    f"Sweep exported to:\n{filepath}"
                )
            except Exception as e:
                logger.exception("Sweep export failed")
                messagebox.showerror("Export Error", str(e))

    @staticmethod
    def _set_text(widget: tk.Text, text: str):
        widget.config(state="normal")
        widget.delete(1.0, tk.END)
        widget.insert(tk.END, text)
        widget.config(state="disabled")


class PcbThermalUI:
    """
    Graphical user interface for the PCB Thermal Toolkit.

    Provides:
    - IPC-2221 trace width calculator
    - Copper resistance vs temperature calculator
    - Thermal via array calculator
    - Design notes and reference links
    """

    WINDOW_TITLE = "PCB Thermal Toolkit"
    WINDOW_MIN_WIDTH = 1100
    WINDOW_MIN_HEIGHT = 800

    FRAME_PADDING = 10

    def __init__(self):
        """Initialize the PCB Thermal Toolkit UI."""
        self.root = tk.Tk()
        self.root.title(self.WINDOW_TITLE)
        self.root.minsize(self.WINDOW_MIN_WIDTH, self.WINDOW_MIN_HEIGHT)

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(1, weight=1)

        self._create_header()

        self.notebook = ttk.Notebook(self.root)
        self.notebook.grid(row=1, column=0, sticky="nsew", padx=self.FRAME_PADDING)

        self._create_status_bar()

        self.panels = [
            CalculatorPanel(
                self, self.notebook, "IPC-2221 Trace Width", TRACE_FIELDS,
                TraceWidthInput, TraceWidthEngine(),
                format_trace_width, trace_trace_width, sweep_trace_current, plot_trace_sweep,
            ),
            CalculatorPanel(
                self, self.notebook, "Copper Resistance vs Temperature", RESISTANCE_FIELDS,
                ResistanceTempInput, ResistanceTemperatureEngine(),
                format_resistance_vs_temp, trace_resistance_vs_temp,
                sweep_resistance_temperature, plot_resistance_sweep,
            ),
            CalculatorPanel(
                self, self.notebook, "Thermal Via Array", VIA_FIELDS,
                ThermalViaInput, ThermalViaEngine(),
                format_thermal_via, trace_thermal_via, sweep_via_count, plot_via_sweep,
            ),
        ]
        self._create_notes_tab()

        for panel in self.panels:
            panel.recompute()
        self.status_var.set("Ready - edit any field to recompute")

    def _create_header(self):
        """Create header section."""
        header_frame = ttk.Frame(self.root, padding=self.FRAME_PADDING)
        header_frame.grid(row=0, column=0, sticky="ew")

        ttk.Label(
            header_frame,
            text="PCB Thermal Toolkit",
            font=("Helvetica", 16, "bold")
        ).pack(anchor="w")

        ttk.Label(
            header_frame,
            text="Fast, unit-aware calculators for trace sizing (IPC-2221), copper losses, "
                 "and thermal-via conduction",
            font=("Helvetica", 10)
        ).pack(anchor="w")

        ttk.Separator(header_frame, orient="horizontal").pack(fill="x", pady=5)

    def _create_notes_tab(self):
        """Create the design notes and resources tab."""
        notes_frame = ttk.Frame(self.notebook, padding=self.FRAME_PADDING)
        self.notebook.add(notes_frame, text="Notes & Resources")

        tips = ttk.LabelFrame(notes_frame, text="Quick Notes & Tips", padding=self.FRAME_PADDING)
        tips.pack(fill="x", pady=5)
        for note in DESIGN_NOTES:
            ttk.Label(tips, text=f"• {note}", wraplength=900, justify="left").pack(anchor="w", pady=2)

        links = ttk.LabelFrame(notes_frame, text="Resources & Further Reading", padding=self.FRAME_PADDING)
        links.pack(fill="x", pady=5)
        for label, url in RESOURCES:
            link = ttk.Label(links, text=label, foreground="blue", cursor="hand2")
            link.pack(anchor="w", pady=1)
            link.bind("<Button-1>", lambda e, u=url: webbrowser.open_new_tab(u))

        ttk.Label(
            notes_frame,
            text=FOOTER,
            wraplength=900,
            font=("Helvetica", 8),
            foreground="gray"
        ).pack(anchor="w", pady=(10, 0))

    def _create_status_bar(self):
        """Create status bar."""
        self.status_var = tk.StringVar(value="Loading...")
        status_bar = ttk.Label(
            self.root,
            textvariable=self.status_var,
            relief="sunken",
            anchor="w"
        )
        status_bar.grid(row=2, column=0, sticky="ew", pady=(5, 0))

    def run(self):
        """Run the UI application."""
        self.root.mainloop()


def main():
    """Main entry point."""
    app = PcbThermalUI()
    app.run()


if __name__ == "__main__":
    main()
