import sys

from canvas_api.client import CanvasClient
from canvas_api.endpoints import get_courses, get_modules
from config import CANVAS_TOKEN
from services.syllabus import is_syllabus_module


def main():
    token = sys.argv[1] if len(sys.argv) > 1 else CANVAS_TOKEN
    client = CanvasClient(token=token)
    courses = get_courses(client)
    with open("canvas_modules_dump.txt", "w", encoding="utf-8") as f:
        for course in courses:
            f.write(f"=== Course {course.id}: {course.name} ===\n")
            for module in get_modules(client, course.id):
                marker = "*" if is_syllabus_module(module.name) else " "
                f.write(f"  {marker} {module.name} | id: {module.id}\n")
            f.write("\n")

if __name__ == "__main__":
    main()
