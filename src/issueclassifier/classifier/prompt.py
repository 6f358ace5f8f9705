"""Prompt template for issue difficulty classification."""

from collections.abc import Sequence

CLASSIFICATION_PROMPT_TEMPLATE = '''You are an expert AI assistant specializing in classifying GitHub issues by difficulty: easy, medium, or difficult.

Use the following criteria for classification:

- **Easy:** Issues that involve minor bug fixes or simple UI/UX adjustments with minimal code changes. These tasks are well-scoped, localized to a specific module or component, have low risk of side effects, and can typically be resolved quickly without extensive debugging or testing. Examples include fixing typos, small layout corrections, or straightforward event handling fixes.
- **Medium:** Issues that require moderate debugging, code refactoring, or the addition of new features that impact multiple components or modules. These tasks demand a solid understanding of the overall system architecture, asynchronous flows, or state management. They may involve integrating with third-party APIs, updating data flows, or handling edge cases. Testing and validation across different environments or devices may be necessary to ensure stability.
- **Difficult:** Complex challenges involving significant architectural redesign, cross-platform or multi-service integration, critical security improvements, or major performance optimizations. These issues require deep expertise in the technology stack, comprehensive knowledge of system dependencies, and careful planning to minimize risks. They often necessitate extensive code changes, multi-phase development, thorough testing (including regression and load testing), and possibly coordination across teams.

Analyze the issue considering:
- Title
- Description
- Programming language and relevant technology stack
- Issue labels: {labels}
- Complexity of debugging, implementation, or testing needed
- Potential impact on the overall system

**IMPORTANT:** Respond ONLY with a JSON object in the following format, without any explanation:

{{ "difficulty": "easy" | "medium" | "difficult" }}

Example:

{{ "difficulty": "easy" }}

Classify this issue:

Title: {title}
Description: {description}
Language: {language}
Labels: {labels}
'''


def format_labels(labels: Sequence[str] | None) -> str:
    """Join labels with ", " in order, or return "None" when there are none."""
    if not labels:
        return "None"
    return ", ".join(labels)


def build_prompt(
    title: str,
    description: str,
    language: str,
    labels: Sequence[str] | None = None,
) -> str:
    """
    Render the classification prompt for one issue.

    The output depends only on the arguments, so equal inputs always give
    byte-identical prompts.

    Args:
        title: Issue title
        description: Issue body
        language: Programming language or technology stack
        labels: Issue labels, in display order

    Returns:
        Prompt text ready to send as a single user message
    """
    return CLASSIFICATION_PROMPT_TEMPLATE.format(
        title=title,
        description=description,
        language=language,
        labels=format_labels(labels),
    )
