# magrathea

Small interactive console programs for running the Magrathea trainee
programme: an opening splash screen and team introductions, audition
candidates and judges, training stages, fitness data and workout routines,
mentor matching and trauma counseling.

Only the Python standard library is used.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads its answers from standard input and writes to standard
output, so it can be used interactively or fed from a file.

| Command | What it does |
| --- | --- |
| `magrathea-splash` | Asks for the date (`yyyy-mm-dd`) and your name, waits, clears the screen and shows the welcome banner. `--delay SECONDS` sets the wait (default 3). |
| `magrathea-intro` | Prints the project members' introduction card, with years of experience as a 32-bit binary number. |
| `magrathea-candidates` | Asks for an audition group name and eleven fields for each of six candidates, then prints a review table with each candidate's age on 2025-05-06. |
| `magrathea-judges` | Asks for a project, the number of judges (at most 100) and one line of seven comma-separated fields per judge, re-asking for lines with the wrong number of commas; answering `Y` then displays the list. |
| `magrathea-easter-egg` | Asks for your name; entering `Arthur` starts a puzzle in which reversed binary values must be decoded into a keyword. |
| `magrathea-stages` | The main menu and the eight training stages. Stages 3 to 8 open only once stages 1 and 2 are passed; a passed stage cannot be evaluated again. |
| `magrathea-fitness` | Enter and view seven fitness test results per member, and set or view six-day workout routines (at most one core exercise per routine). |
| `magrathea-mentoring` | Enter eight mentor names and match them one to one with trainees. |
| `magrathea-counseling` | Record trauma notes for known members, run three-question counseling sessions and view summaries. |

## Using the pieces from Python

The logic behind each command can be used on its own:

```python
from magrathea.intro import to_binary_32
from magrathea.judges import is_complete_entry, parse_judge
from magrathea.easter_egg import EasterEgg, to_binary, shuffle_and_convert
from magrathea.mentoring import Mentor, match_mentors, name_value
from magrathea.stages import TrainingProgress, StageLockedError

print(to_binary_32(15))          # 00000000 00000000 00000000 00001111
print(to_binary("s"))            # 01110011
print(name_value("Jin"))         # sum of the character codes

line = "Jane Doe, Female, Studio, Director, Vocal, jane@example.com, ext 12"
if is_complete_entry(line):
    print(parse_judge(line))

egg = EasterEgg()
print(egg.reversed_binaries())
print(egg.is_easter_egg("specter"))
print(shuffle_and_convert(egg.keyword))

mentors = [Mentor(id=n, name=f"Mentor {n}") for n in range(1, 9)]
for mentor in match_mentors(mentors):
    print(mentor.id, mentor.trainee_index)

progress = TrainingProgress()
try:
    progress.record(3, True)
except StageLockedError:
    print("pass stages 1 and 2 first")
```

Other building blocks:

- `magrathea.splash.banner(name, date)` returns the splash banner text.
- `magrathea.candidates`: `Candidate`, `calculate_age`, `compact_dob`,
  `format_candidate` and `render_review`.
- `magrathea.judges`: `Judge`, `parse_judge` (raises `ValueError` when the
  entry does not have seven fields) and `format_judge`.
- `magrathea.stages`: `StageStatus`, `TrainingProgress` (`can_access`,
  `record`, `status`) and `render_training_menu`.
- `magrathea.fitness`: `parse_fitness_data` parses a comma-separated line of
  seven scores; `FitnessRecords` stores them per nickname (`set_scores`,
  `scores_for`, `score`, `full_name`); `WorkoutRoutine.add_day` builds a
  six-day routine and raises `ValueError` for invalid choices or a second
  core exercise.
- `magrathea.mentoring.random_ability` returns a random score from 100 to
  1000.
- `magrathea.counseling.CounselingCenter` holds trauma records and the
  counseling log (`record_trauma`, `pick_questions`, `add_response`,
  `summary`); answers must be 1 to 100 characters and the log holds at most
  50 entries.

## What it does not do

- Nothing is saved: every command keeps its data in memory and forgets it on
  exit. The commands are separate programs and share no data with each other.
- In `magrathea-stages`, the "Audition Management" and "Debut" menu entries
  only print "Feature coming soon..."; the training stages record pass or
  fail but do not run the training itself.