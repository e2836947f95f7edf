from autograder.database import Base

from .classes import ClassInfo
from .user_class import UserClass
from .users import User

# Import all models here so that Base.metadata knows every table
# before create_all runs and the enrollment trigger is attached.
