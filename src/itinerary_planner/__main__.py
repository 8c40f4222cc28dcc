"""
Main entry point for the itinerary planner.
"""

import logging
from typing import Optional

from .config.settings import GEMINI_API_KEY, STORE_PATH, validate_api_keys, default_generation_config
from .core.state import FormState, empty_form_state
from .core.store import FormStateStore, JsonFileStore, KeyValueStore
from .core.history import HistoryManager
from .core.generator import ContentGenerator, build_request_text
from .utils.markdown import render_markdown
from .utils.itinerary import ItineraryParseError, parse_itinerary, itinerary_to_markdown

HELP_TEXT = """Commands:
  new       Fill in the form and generate a plan
  load      Show the last saved form state
  history   List saved plans
  show N    Show plan N as markdown
  html N    Show plan N rendered as HTML
  help      Show this message
  exit      Quit"""

def prompt_form(previous: Optional[FormState]) -> FormState:
    """Asks for each form field, offering the previous value as default."""
    form = empty_form_state()
    labels = {
        "businessName": "Business name",
        "projectName": "Project name",
        "studentDepartment": "Student department",
        "additionalContext": "Additional context",
    }
    for field_name, label in labels.items():
        default = previous[field_name] if previous else ""
        suffix = f" [{default}]" if default else ""
        value = input(f"{label}{suffix}: ").strip()
        form[field_name] = value or default
    return form

def display_state(form: FormState) -> None:
    """Prints a form state in a user-friendly format."""
    print(f"\n** {form['projectName'] or 'Untitled project'} **")
    print(f"   Business: {form['businessName']}")
    print(f"   Department: {form['studentDepartment']}")
    if form["additionalContext"]:
        print(f"   Context: {form['additionalContext']}")
    if form["response"]:
        print(f"\n{form['response']}")
    else:
        print("   No plan generated yet.")

def run_generation(generator: ContentGenerator, form: FormState) -> FormState:
    """Generates a plan for the form and returns the form with its response filled in."""
    raw_text = generator.generate(build_request_text(form)) or ""
    try:
        response = itinerary_to_markdown(parse_itinerary(raw_text))
    except ItineraryParseError as e:
        logging.warning(f"Generated plan did not match the schema: {e}")
        response = raw_text
    return FormState(**{**form, "response": response})

def parse_index(argument: str) -> Optional[int]:
    try:
        return int(argument)
    except ValueError:
        print(f"'{argument}' is not a number.")
        return None

def main(store: Optional[KeyValueStore] = None, generator: Optional[ContentGenerator] = None):
    """Main entry point for the itinerary planner."""
    print("--- Welcome to the Project Itinerary Planner ---")
    print(HELP_TEXT)

    store = store if store is not None else JsonFileStore(STORE_PATH)
    form_store = FormStateStore(store)
    history = HistoryManager(store)

    if generator is None:
        if not validate_api_keys():
            print("\nError: Missing required API keys. Please set the following environment variables:")
            print("- GEMINI_API_KEY")
            return
        generator = ContentGenerator(default_generation_config(), api_key=GEMINI_API_KEY)

    while True:
        try:
            command = input("\n> ").strip()
            if not command:
                continue
            name, _, argument = command.partition(" ")
            name = name.lower()

            if name in ["exit", "quit"]:
                print("Goodbye!")
                break

            if name == "help":
                print(HELP_TEXT)

            elif name == "new":
                try:
                    previous = form_store.load_form_state()
                except ValueError as e:
                    logging.warning(f"Saved form state is unreadable, starting from blank fields: {e}")
                    previous = None
                form = prompt_form(previous)
                print("Generating your plan...")
                form = run_generation(generator, form)
                form_store.save_form_state(form)
                history.append_to_history(form)
                display_state(form)

            elif name == "load":
                form = form_store.load_form_state()
                if form is None:
                    print("No saved form state.")
                else:
                    display_state(form)

            elif name == "history":
                entries = history.get_history()
                if not entries:
                    print("History is empty.")
                for index, entry in enumerate(entries):
                    print(f"{index}: {entry['projectName'] or 'Untitled project'} ({entry['businessName']})")

            elif name in ["show", "html"]:
                index = parse_index(argument)
                if index is None:
                    continue
                entry = history.get_history_entry(index)
                if entry is None:
                    print(f"No history entry {index}.")
                elif name == "show":
                    display_state(entry)
                else:
                    print(render_markdown(entry["response"]))

            else:
                print(f"Unknown command '{name}'. Type 'help' for the list of commands.")

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break
        except Exception as e:
            logging.error(f"Unexpected error: {e}", exc_info=True)
            print(f"\nSorry, an unexpected error occurred: {e}")

if __name__ == "__main__":
    main()
