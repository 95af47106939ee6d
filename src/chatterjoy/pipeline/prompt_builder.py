"""
Prompt builder for the reply stage.

Renders the Jinja2 reply template with the user's text and the detected
emotion. The bundled template lives in chatterjoy/prompts/; a different file
can be supplied through REPLY_PROMPT_TEMPLATE_PATH.
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"
DEFAULT_TEMPLATE_NAME = "reply_prompt.txt"


class ReplyPromptBuilder:
    """Build the generation prompt from (text, emotion)."""
    
    def __init__(self, template_path: Optional[Path] = None):
        """
        Initialize prompt builder.
        
        Args:
            template_path: Template file to use instead of the bundled one
        """
        if template_path is not None:
            template_path = Path(template_path)
            templates_dir, template_name = template_path.parent, template_path.name
        else:
            templates_dir, template_name = DEFAULT_TEMPLATES_DIR, DEFAULT_TEMPLATE_NAME
        
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            autoescape=False  # Prompts, not HTML
        )
        
        try:
            self.template = self.jinja_env.get_template(template_name)
        except Exception as e:
            logger.error(
                "Failed to load reply prompt template",
                templates_dir=str(templates_dir),
                template=template_name,
                error=str(e),
            )
            raise
        
        logger.info(
            "Loaded reply prompt template",
            templates_dir=str(templates_dir),
            template=template_name,
        )
    
    def build(self, text: str, emotion: str) -> str:
        """Render the prompt for one conversational turn."""
        return self.template.render(text=text.strip(), emotion=emotion).strip()
