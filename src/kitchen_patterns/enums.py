from enum import StrEnum


class Course(StrEnum):
    DRINK = "drink"
    MAIN_COURSE = "mainCourse"
    DESSERT = "dessert"
