"""Constants used across the synchronization workflow."""

# Notion property names on the tasks database.
NOTION_TASK_TITLE_PROPERTY = "Task"
NOTION_TASK_STATUS_PROPERTY = "Status"
NOTION_TASK_ASSIGNEE_PROPERTY = "Assign"
NOTION_TASK_PROJECT_PROPERTY = "Projects"

# Title property on the projects database.
NOTION_PROJECT_NAME_PROPERTY = "Name"

# Status option names.
STATUS_DONE = "Done"
STATUS_IN_PROGRESS = "In progress"
STATUS_NOT_STARTED = "Not started"

DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_NOTION_API_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"

GITHUB_ISSUES_PAGE_SIZE = 100
NOTION_PAGE_SIZE = 100

DEFAULT_OPERATION_BATCH_SIZE = 10

# The repo is everything before the first "#"; GitHub repository names can't
# contain that character.
TASK_TITLE_PATTERN = r"^(?P<repo>[^#]+)#(?P<number>\d+):"
