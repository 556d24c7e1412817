"""Tutor prompt template models: pure data, no I/O."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

# Placeholders every system_prompt_template must contain, and the only ones it may use.
PROMPT_FIELDS = ('title', 'description', 'test_cases', 'start_code', 'redirect_message')


class TemplateMetadata(BaseModel):
    name: str = ''
    description: str = ''
    key: str = ''  # file key (set by loader, not stored in YAML)


class TutorTemplate(BaseModel):
    metadata: TemplateMetadata = Field(default_factory=TemplateMetadata)
    system_prompt_template: str
    redirect_message: str = Field(min_length=1)

    @model_validator(mode='after')
    def _validate_prompt_template(self) -> TutorTemplate:
        """Reject templates that would fail to render, so a bad file fails at load time."""
        missing = [f for f in PROMPT_FIELDS if '{' + f + '}' not in self.system_prompt_template]
        if missing:
            raise ValueError(f'system_prompt_template is missing placeholders: {", ".join(missing)}')
        try:
            self.system_prompt_template.format(**dict.fromkeys(PROMPT_FIELDS, ''))
        except KeyError as e:
            raise ValueError(
                f'system_prompt_template has unknown placeholder {{{e.args[0]}}}; '
                'write literal braces as {{ and }}'
            ) from e
        except (IndexError, AttributeError, ValueError) as e:
            raise ValueError(
                f'system_prompt_template is not a valid format string ({e}); write literal braces as {{{{ and }}}}'
            ) from e
        return self
