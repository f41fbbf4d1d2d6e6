"""nutricalc - nutrition practice calculations.

Energy expenditure (GEB/GET), macronutrient distribution and micronutrient
DRI recommendations, with a GraphQL API on top.
"""

__version__ = "0.1.0"
