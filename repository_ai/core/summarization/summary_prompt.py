"""
Critical Technical Summary prompt.

Dependencies: langchain_core.prompts
System role: Prompt template for AI document summaries
"""

from langchain_core.prompts import ChatPromptTemplate

DEFAULT_SUMMARY_QUESTION = "Generate a comprehensive Critical Technical Summary of this research paper."

CITATION_TEMPLATE = '[CitationID: {index}] (Page {page_start}-{page_end}) "{phrase}..."\n{content}\n\n'

SUMMARY_INSTRUCTIONS = """Task: Produce a Critical Technical Summary.

Rules:
- No first-person language.
- No role self-references.
- No phrases like "as a researcher", "this paper shows", "we conclude".
- Output must be neutral, third-person, technical.
- Do not include meta commentary.
- Do not restate the question.
- Use concise, academic tone.

Output structure (mandatory):

## Methodology
<content>

## Mechanism
<content>

## Results
<content>

## Conclusion
<content>"""

SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SUMMARY_INSTRUCTIONS),
    ("human", """Context:
{context}

Question:
{question}"""),
])
