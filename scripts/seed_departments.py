#!/usr/bin/env python3
"""Seed the database with departments. Students are registered through the API."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from student_directory.database import init_db, SessionLocal
from student_directory.models import Department

DEPARTMENTS = [
    {"id": "1", "name": "Computer Science", "address": "Engineering Building, Room 101"},
    {"id": "2", "name": "Mathematics", "address": "Science Hall, Room 204"},
    {"id": "3", "name": "Physics", "address": "Science Hall, Room 310"},
    {"id": "4", "name": "Engineering", "address": "Engineering Building, Room 220"},
    {"id": "5", "name": "Biology", "address": "Life Sciences Center, Room 15"},
]


def seed():
    init_db()
    db = SessionLocal()
    try:
        # Idempotent on department id
        for dept_data in DEPARTMENTS:
            existing = db.query(Department).filter(
                Department.id == dept_data["id"]
            ).first()
            if not existing:
                db.add(Department(**dept_data))
                print(f"  Created department: {dept_data['name']}")
            else:
                print(f"  Department already exists: {dept_data['name']}")
        db.commit()
        print("Seed complete.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
