"""
Prompts answering questions about the Gospel of John.

STUFFING_PROMPT receives a whole document as {context}; RAG_PROMPT receives
the retrieved chunks as {documents} and the user question as {input}.

Dependencies: langchain_core.prompts
System role: Prompts for the prompt stuffing and RAG lessons
"""

from langchain_core.prompts import PromptTemplate

STUFFING_PROMPT = PromptTemplate.from_template(
    """Use the following context to answer the question: who is The Word in the first chapter of John?
If the context does not contain the answer, say that you don't know.

CONTEXT:
{context}"""
)

RAG_PROMPT = PromptTemplate.from_template(
    """You are a helpful assistant answering questions about the Gospel of John.
Use the information from the DOCUMENTS section to give an accurate answer.
If you are unsure or the answer is not in the DOCUMENTS section, simply state that you don't know.

QUESTION:
{input}

DOCUMENTS:
{documents}"""
)
