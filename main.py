#!/usr/bin/env python3
"""
Macro Tracker

A full-screen terminal application for logging food and keeping a running
total of calories and macronutrients (protein, carbs, fat).

Features:
- Loads known foods from the tab-separated `foods` file
- Overview screen with today's totals and macro ratio
- Add-food form with Tab / Shift+Tab navigation between fields

Keys:
    Overview:  a  add food     q  quit
    Form:      Tab / Shift+Tab  change field
               Enter            submit
               Esc              cancel

Usage:
    python main.py

    Or if made executable:
    ./main.py
"""

from cli import run

if __name__ == "__main__":
    run()
