APP_ORG = "PyNotepad"
APP_NAME = "My Notepad"

TEXT_ENCODING = "utf-8"
FILE_FILTER = "Text (*.txt);;All files (*)"

MSG_ERROR_TITLE = "Error"
MSG_OPEN_FAILED = "Could not open file."
MSG_SAVE_FAILED = "Could not save file."

STATUS_MSEC = 3000

SETTINGS_GEOMETRY = "window/geometry"
