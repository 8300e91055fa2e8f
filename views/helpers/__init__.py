"""
View helpers - pure formatting and display rules, no Streamlit dependencies.
"""
