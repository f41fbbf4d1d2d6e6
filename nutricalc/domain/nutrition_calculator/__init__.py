"""Nutrition calculator domain.

Energy expenditure (GEB/GET), macronutrient distribution and micronutrient
DRI lookups. Everything here is a pure, stateless calculation.
"""
