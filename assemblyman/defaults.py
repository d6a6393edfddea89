"""
Default workshop catalog.

Materials and sub-assembly recipes of the antenna assembly line.
Override any of them through the ASSEMBLYMAN setting:

    ASSEMBLYMAN = {
        "MATERIALS": [...],
        "SUB_ASSEMBLIES": {...},
        "COMPLETE_UNITS": {...},
    }
"""


def _material(name: str, reorder_point: int, unit: str = "pcs") -> dict:
    return {"name": name, "unit": unit, "reorder_point": reorder_point}


MATERIALS = [
    # Frame
    _material("5/32 x 3/4 Tube", 100),
    _material("1/8 x 1/2 Tube", 500),
    _material("1/8 x 3/4 Tube", 100),
    _material("End Knob Round", 300),
    _material("End Knob Square 1/2x1/2", 100),
    _material("Dipole (CI Cup)", 50),
    _material("U-Clip", 50),
    _material("12cm Round Tube 7/8 MF", 100),
    _material("15cm Round Tube 5/8 MF", 50),
    _material("5/8 x 4 CSK Screw", 100),
    _material("3/8 x 4 Screw", 100),
    # Wire / connectors
    _material("16 1/2 Ygr Wire", 50),
    _material("F-Connector Male (4005)", 100),
    _material("F-Connector Female (2002)", 100),
    # Booster
    _material("Macking Coil", 50),
    _material("Coil 28gsm (25cm)", 50),
    _material("Coil 26gsm (16cm)", 50),
    _material("Coil 25gsm (36cm)", 50),
    _material("Resistor 1k", 200),
    _material("Resistor 100-ohm", 200),
    _material("Resistor 68k", 200),
    _material("Resistor 2k", 200),
    _material("Resistor 150-R", 200),
    _material("Resistor 10k", 200),
    _material("LED Multicolour", 200),
    _material("LED 5mm", 200),
    _material("PF 12", 200),
    _material("PF 39", 200),
    _material("PF 102 Indian", 200),
    _material("PF 102 Normal", 200),
    _material("Capacitor 25v 100uF", 50),
    _material("Capacitor 25v 220uF", 50),
    _material("Transistor (2355)", 100),
    # Power supply
    _material("Plastic Box (Power)", 50),
    _material("Transformer", 50),
    _material("IN4007 Diode", 200),
    _material("5C 2V Wire 3-yard", 50),
    _material("4-Antenna Jack", 50),
    _material("AC Cord", 50),
    # Packing
    _material("Packing Bag", 50),
    _material("Warranty Card", 50),
    _material("Round Sticker", 50),
    _material("Box Plastic Cover", 50),
    _material("Box Sticker", 50),
]


SUB_ASSEMBLIES = {
    "Antenna Frame Assembly": {
        "5/32 x 3/4 Tube": 1,
        "1/8 x 1/2 Tube": 8,
        "1/8 x 3/4 Tube": 2,
        "End Knob Round": 6,
        "End Knob Square 1/2x1/2": 2,
        "Dipole (CI Cup)": 1,
        "U-Clip": 1,
        "12cm Round Tube 7/8 MF": 2,
        "15cm Round Tube 5/8 MF": 1,
        "5/8 x 4 CSK Screw": 2,
    },
    "Booster Assembly": {
        "Macking Coil": 1,
        "Coil 28gsm (25cm)": 1,
        "Coil 26gsm (16cm)": 2,
        "Resistor 1k": 1,
        "LED Multicolour": 1,
        "PF 12": 1,
        "PF 39": 2,
        "PF 102 Indian": 1,
        "PF 102 Normal": 2,
        "Resistor 100-ohm": 1,
        "Resistor 68k": 2,
        "Resistor 2k": 1,
        "Resistor 150-R": 1,
        "Capacitor 25v 100uF": 1,
        "F-Connector Female (2002)": 1,
        "Transistor (2355)": 2,
    },
    "Power Supply Assembly": {
        "Plastic Box (Power)": 1,
        "Transformer": 1,
        "IN4007 Diode": 2,
        "Coil 25gsm (36cm)": 1,
        "5C 2V Wire 3-yard": 1,
        "4-Antenna Jack": 1,
        "F-Connector Female (2002)": 1,
        "Resistor 10k": 1,
        "PF 102 Normal": 1,
        "Capacitor 25v 220uF": 1,
        "3/8 x 4 Screw": 2,
        "LED 5mm": 1,
        "AC Cord": 1,
    },
    "Wire Assembly": {
        "16 1/2 Ygr Wire": 1,
        "F-Connector Male (4005)": 2,
    },
    "Packaging Set": {
        "Packing Bag": 1,
        "Warranty Card": 1,
        "Round Sticker": 1,
        "Box Plastic Cover": 1,
        "Box Sticker": 1,
    },
}


# Complete unit name → sub-assemblies it is built from.
COMPLETE_UNITS = {
    "COMPLETE ANTENNA UNIT": [
        "Antenna Frame Assembly",
        "Booster Assembly",
        "Power Supply Assembly",
        "Wire Assembly",
        "Packaging Set",
    ],
}
