"""
Design Notes and References
===========================

Static guidance shown alongside the calculators.

DISCLAIMER: These are engineering estimates based on public formulas
(IPC-2221 curve fit, basic materials physics). Validate against lab
measurements and your fabricator's capabilities.
"""

DESIGN_NOTES = [
    "IPC-2221 is a legacy curve fit; IPC-2152 (with environment, copper planes, "
    "adjacency) is more accurate for ampacity. Use dT <= 10-20°C for conservative designs.",
    "For high current rails, prefer short, wide copper pours, parallel paths, and "
    "stitched planes. Current density and hotspots dominate Joule heating (I²R).",
    "Thermal vias work best when tightly packed under the heat source (e.g., "
    "0.3-0.4 mm drills, ~1.0-1.2 mm pitch) and tied to large internal/external planes.",
    "Validate with IR camera or thermocouples in worst-case ambient. Consider "
    "airflow, enclosure, and nearby hot components.",
]

# (label, url)
RESOURCES = [
    ("Digi-Key IPC-2221 Trace Width Calculator (formulas)",
     "https://www.digikey.com/en/resources/conversion-calculators/conversion-calculator-pcb-trace-width"),
    ("Avnet PCB Trace Width Calculator (formulas shown)",
     "https://www.avnet.com/americas/solutions/product-and-solutions-design/design-hub/design-tools/calculators/pcb-trace-width/"),
    ("IPC-2221 excerpt showing I = k·dT^0.44·A^0.725",
     "https://www-eng.lbl.gov/~shuman/NEXT/CURRENT_DESIGN/TP/MATERIALS/IPC-2221A%28L%29.pdf"),
    ("HyperPhysics - Copper resistivity & alpha",
     "https://hyperphysics.phy-astr.gsu.edu/hbase/Tables/rstiv.html"),
    ("Analog Devices - Thermally Enhanced Packages (thermal vias guidance)",
     "https://www.analog.com/media/en/technical-documentation/application-notes/application_notes_for_thermally_enhanced_leaded_packages.pdf"),
    ("TI SLUA566A - Using Thermal Calculation Tools",
     "https://www.ti.com/lit/slua566"),
    ("Altium - PCB Heat Dissipation Techniques",
     "https://resources.altium.com/p/pcb-heat-dissipation-techniques"),
]

FOOTER = (
    "Use responsibly. Verify with prototypes, IR measurements, and your fabricator's "
    "rules. IPC-2152 provides richer guidance than IPC-2221 curves; use it when available."
)
