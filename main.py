# main.py

"""Streamlit web UI for the sensitive-value hashing system.

Provides a simple interface to paste structured log context and a
sensitive-key specification, and view the context with matched values
replaced by digests.
"""

import json
import logging

import streamlit as st

from hash_sensitive.core.exceptions import HashSensitiveError
from hash_sensitive.core.loader import SpecificationLoader
from hash_sensitive.logging_config import configure_logging
from hash_sensitive.service.config import settings
from hash_sensitive.service.pipeline import redact_context
from hash_sensitive.service.processor import HashSensitiveProcessor

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

EXAMPLE_CONTEXT = """{
  "user": {"email": "jane@example.com", "password": "hunter2"},
  "request": {"headers": {"authorization": "Bearer abc123"}, "path": "/login"}
}"""

EXAMPLE_SPEC = """sensitive_keys:
  - password
  - request:
      headers:
        - authorization
"""


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts a JSON context and a
    YAML specification from the user, runs the redaction pipeline, and
    displays the redacted context along with the replaced key paths.
    """
    st.set_page_config(
        layout="wide", page_title="Sensitive Context Hashing", page_icon="🔒"
    )

    st.title("Sensitive Context Hashing")
    st.markdown(
        "Replace sensitive values in structured log context with one-way digests."
    )
    st.markdown("---")

    with st.sidebar:
        st.header("Options")
        algorithm = st.selectbox("Algorithm", ["sha256", "sha512", "sha1", "md5"])
        use_limit = st.checkbox("Limit hashed length")
        length_limit = (
            int(st.number_input("Length limit", min_value=0, value=8, step=1))
            if use_limit
            else None
        )
        exclusive_subtree = st.checkbox("Exclusive subtree", value=True)

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input")
        context_text = st.text_area("Context (JSON)", value=EXAMPLE_CONTEXT, height=250)
        spec_text = st.text_area("Sensitive keys (YAML)", value=EXAMPLE_SPEC, height=200)

    with col2:
        st.subheader("Redacted Output")

        if st.button("Hash sensitive values", type="primary"):
            try:
                context = json.loads(context_text)
            except json.JSONDecodeError as e:
                st.error(f"Context is not valid JSON: {e}")
                logger.warning("Invalid JSON context submitted")
                return

            try:
                specification = SpecificationLoader.loads(spec_text, source="input")
                processor = HashSensitiveProcessor(
                    specification,
                    algorithm=algorithm,
                    length_limit=length_limit,
                    exclusive_subtree=exclusive_subtree,
                )
                result = redact_context(context, processor=processor)

            except HashSensitiveError as e:
                st.error(f"Redaction failed: {e}")
                return

            st.json(result.context)
            st.success(f"Redaction complete. Hashed {result.redacted_count} values.")

            if result.redacted_paths:
                st.markdown("\n".join(f"- `{path}`" for path in result.redacted_paths))

            logger.info(
                f"Redaction successful: {result.redacted_count} values hashed",
                extra={"algorithm": algorithm},
            )


if __name__ == "__main__":
    main()
