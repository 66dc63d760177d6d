"""
Filename:       data.py
Author:         jole
Created:        19.10.2026

Description:    The bundled dataset shown when no --source is given on the command line.

Notes:          Records are never modified after start-up, the controller wraps them in a tuple.
"""

from typing import Tuple

from .defs import Record



DATA: Tuple[Record, ...] = (
    {"make": "Toyota",        "model": "Corolla",     "price": 21550},
    {"make": "Ford",          "model": "Mustang",     "price": 27470},
    {"make": "Honda",         "model": "Civic",       "price": 22550},
    {"make": "Chevrolet",     "model": "Malibu",      "price": 23200},
    {"make": "Tesla",         "model": "Model 3",     "price": 38990},
    {"make": "BMW",           "model": "3 Series",    "price": 43800},
    {"make": "Audi",          "model": "A4",          "price": 39900},
    {"make": "Nissan",        "model": "Altima",      "price": 24550},
    {"make": "Hyundai",       "model": "Elantra",     "price": 20950},
    {"make": "Kia",           "model": "Sportage",    "price": 26290},
    {"make": "Mazda",         "model": "CX-5",        "price": 28050},
    {"make": "Subaru",        "model": "Outback",     "price": 28895},
    {"make": "Volkswagen",    "model": "Jetta",       "price": 21435},
    {"make": "Mercedes-Benz", "model": "C-Class",     "price": 46950},
    {"make": "Lexus",         "model": "ES",          "price": 42090},
    {"make": "Jeep",          "model": "Wrangler",    "price": 31995},
    {"make": "Honda",         "model": "Accord",      "price": 27295},
    {"make": "Volvo",         "model": "XC60",        "price": 43550},
    {"make": "Porsche",       "model": "Macan",       "price": 61800},
    {"make": "Dodge",         "model": "Charger",     "price": 33125},
    {"make": "Ram",           "model": "1500",        "price": 38570},
    {"make": "GMC",           "model": "Sierra",      "price": 37000},
    {"make": "Cadillac",      "model": "Escalade",    "price": 81895},
    {"make": "Acura",         "model": "Integra",     "price": 31300},
    {"make": "Mitsubishi",    "model": "Outlander",   "price": 27995},
)
