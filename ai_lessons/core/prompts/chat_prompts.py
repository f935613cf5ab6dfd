"""
Chat and prompt template lesson prompts.

Dependencies: langchain_core.prompts
System role: Prompts for the plain chat and templating lessons
"""

from langchain_core.prompts import ChatPromptTemplate, PromptTemplate

DAD_JOKE_PROMPT = "Tell me a dad joke"

YOUTUBE_PROMPT = PromptTemplate.from_template(
    """List 10 of the most popular YouTubers in {genre} along with their current subscriber counts.
If you don't know the answer, just say "I don't know"."""
)

DAD_SYSTEM_MESSAGE = (
    "You're a Dad. You only tell Dad Jokes. If someone asks you to tell a joke, "
    "either make it a Dad Joke or say you can't do it."
)

DAD_USER_MESSAGE = "Talk to me about the 100 year war in France"

DAD_PROMPT = ChatPromptTemplate.from_messages([
    ("system", DAD_SYSTEM_MESSAGE),
    ("human", DAD_USER_MESSAGE),
])
