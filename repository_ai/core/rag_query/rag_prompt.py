"""
RAG query prompts.

Defines the grounded-answer prompt built from retrieved sources and the
fallback prompt used when nothing clears the similarity threshold.

Dependencies: langchain_core.prompts
System role: Prompt templates for retrieval-augmented answers
"""

from langchain_core.prompts import PromptTemplate

SOURCE_TEMPLATE = '[Source {index}]: (Page {page_start}-{page_end}) "{phrase}..."\n{content}\n\n'

RAG_TEMPLATE = """
You are an intelligent assistant for the Galing-PUP academic repository.
Answer the user's question using ONLY the provided context sources below.
If the answer is not in the context, clearly state that you cannot find the answer in the provided documents.

--- CONTEXT START ---
{context}
--- CONTEXT END ---

User Query: {query}

Instructions:
1. Cite sources using [Source X] notation.
2. Mention specific page numbers when relevant.
3. Be concise and accurate.
4. If the context is empty or irrelevant, do not hallucinate information.
"""

NO_SOURCES_TEMPLATE = (
    "User Query: {query}\n\n"
    "No relevant sources found in the knowledge base. Please answer based on general "
    "knowledge but state that no internal documents were matched."
)

RAG_PROMPT = PromptTemplate.from_template(RAG_TEMPLATE)
NO_SOURCES_PROMPT = PromptTemplate.from_template(NO_SOURCES_TEMPLATE)
