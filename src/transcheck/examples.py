"""
Example survey document for proof-of-concept runs and tests.

A small SurveyJS-shaped survey with exactly three known findings
under the default configuration:
    - pages.0.elements.0.title   missing_locale  (has default/es, no es-CO)
    - pages.0.elements.1.html    html_in_value   (default contains <b>)
    - pages.0.elements.2.title   empty_fallback  (default and en are blank)
"""
from typing import Any, Dict


def build_example_survey() -> Dict[str, Any]:
    return {
        "title": {"default": "Child Survey", "es-CO": "Encuesta infantil"},
        "pages": [
            {
                "name": "page1",
                "elements": [
                    {
                        "type": "radiogroup",
                        "name": "age",
                        "title": {"default": "How old are you?", "es": "¿Cuántos años tienes?"},
                        "choices": [
                            {"value": "1", "text": {"default": "One", "es_co": "Uno"}},
                            {"value": "2", "text": {"en": "Two"}},
                        ],
                    },
                    {
                        "type": "html",
                        "name": "intro",
                        "html": {"default": "Welcome <b>friend</b>", "es-CO": "Bienvenido"},
                    },
                    {
                        "type": "text",
                        "name": "nickname",
                        "title": {"default": "", "en": " ", "es-CO": "Apodo"},
                    },
                ],
            }
        ],
    }
