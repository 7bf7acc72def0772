import os
from datetime import datetime

from openpyxl import Workbook

WORKBOOK_PATH = os.getenv("WORKBOOK_PATH", "meals.xlsx")

if os.path.exists(WORKBOOK_PATH):
    raise SystemExit(f"{WORKBOOK_PATH} already exists; not overwriting.")

# Initial configuration: A1 year, B1 notice, then names / today's meals / next day's meals
year_name = str(datetime.now().year)
notice_text = "Submit your meal choice before 10 AM."
initial_names = ['Alice', 'Bob']
initial_meals = ['Veg', 'Non-Veg']
initial_next_day_meals = ['Veg', 'Non-Veg']

wb = Workbook()

config = wb.active
config.title = os.getenv("CONFIG_SHEET_NAME", "Config")
config['A1'] = year_name
config['B1'] = notice_text
for column, values in enumerate([initial_names, initial_meals, initial_next_day_meals], start=1):
    for row, value in enumerate(values, start=2):
        config.cell(row=row, column=column, value=value)

entries = wb.create_sheet(os.getenv("DATA_SHEET_NAME", "Meal_Entries"))
entries.append(['Timestamp', 'Name', "Today's Meal", "Next Day's Meal"])

reports = wb.create_sheet(os.getenv("REPORTS_SHEET_NAME", "Reports"))
reports.append(['NameOfB', 'Given Taka', 'Total Meal', 'Enough'])

wb.save(WORKBOOK_PATH)

print(f"Workbook {WORKBOOK_PATH} initialized.")
