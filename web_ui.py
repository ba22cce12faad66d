import streamlit as st

from semantic_sphere.interactive import build_figure
from semantic_sphere.lexicon import (
    ABSTRACTION_LAYERS,
    CONNECTOR_WORDS,
    DIMENSIONS,
    DIMENSION_NAMES,
    vocabulary_by_dimension,
    vocabulary_by_layer,
)
from semantic_sphere.plot import PlotResult, hex_color, plot_sentences
from semantic_sphere.positioning import AxisTripleStrategy, SphericalStrategy
from semantic_sphere.sentences import UnmappedWordsError, validate_sentence

st.set_page_config(page_title="Semantic Sphere", layout="wide")

st.title("🌐 Concrete → Abstract Semantic Sphere")
st.caption(
    "Center = concrete objects. Perimeter = abstract concepts. "
    "Angular dimensions distinguish orthogonal semantic properties."
)

# Session state
if "sentences" not in st.session_state:
    st.session_state.sentences = []
if "draft" not in st.session_state:
    st.session_state.draft = []
if "result" not in st.session_state:
    st.session_state.result = PlotResult()


def add_sentence(text: str):
    """Validate and store a sentence. Returns an error message, or None on success."""
    try:
        sentence = validate_sentence(text)
    except UnmappedWordsError as e:
        return f"❌ Unmapped words: {', '.join(e.words)}"
    except ValueError as e:
        return str(e)
    st.session_state.sentences.append(sentence)
    return None


def submit_sentence():
    # Runs before the rerun, so the input can still be reset here
    error = add_sentence(st.session_state.sentence_input)
    st.session_state.input_error = error
    if error is None:
        st.session_state.sentence_input = ""


def show_error(error: str):
    st.error(error)
    st.info("💡 Use the Word Picker tab to build a sentence from known words")


def word_buttons(words, key_prefix: str, cols: int = 4):
    columns = st.columns(cols)
    for i, w in enumerate(words):
        if columns[i % cols].button(w, key=f"{key_prefix}:{w}"):
            st.session_state.draft.append(w)
            st.rerun()


# Sidebar
with st.sidebar:
    st.header("Input Sentences")

    with st.form("sentence_form"):
        st.text_input("Sentence", key="sentence_input", placeholder="The stone became sand became dust became matter")
        st.form_submit_button("Add", on_click=submit_sentence)
    if st.session_state.get("input_error"):
        show_error(st.session_state.input_error)

    show_layers = st.checkbox("Show abstraction layers", value=True)

    view = st.radio("View", ["Sphere", "Direct axes"], horizontal=True)
    strategy = None
    if view == "Direct axes":
        axes = st.multiselect("Axes (x, y, z)", DIMENSION_NAMES, default=list(DIMENSION_NAMES[:3]), max_selections=3)
        if len(axes) == 3:
            strategy = AxisTripleStrategy(axes)
        else:
            st.warning("Pick exactly three dimensions")
    else:
        strategy = SphericalStrategy()

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Plot Journeys", type="primary", disabled=not st.session_state.sentences or strategy is None):
            st.session_state.result = plot_sentences(st.session_state.sentences, strategy)
    with col2:
        if st.button("Clear"):
            st.session_state.sentences = []
            st.session_state.draft = []
            st.session_state.result = PlotResult()

    st.divider()

    st.subheader("Collected Sentences")
    if st.session_state.sentences:
        for s in st.session_state.sentences:
            st.markdown(f"- {s}")
    else:
        st.caption("No sentences yet...")

    st.divider()

    st.subheader("Abstraction Layers")
    for layer in ABSTRACTION_LAYERS:
        st.markdown(
            f"<span style='color:{hex_color(layer.color)}'>●</span> "
            f"**{layer.level}. {layer.name}** · {layer.examples}",
            unsafe_allow_html=True,
        )

    st.subheader("Orthogonal Dimensions")
    for dim in DIMENSIONS:
        st.markdown(
            f"<span style='color:{hex_color(dim.color)}'>●</span> **{dim.name}:** {dim.description}",
            unsafe_allow_html=True,
        )

# Main area
tab1, tab2 = st.tabs(["🌐 Sphere", "🧩 Word Picker"])

with tab1:
    result: PlotResult = st.session_state.result
    st.plotly_chart(build_figure(result, show_layers=show_layers), width="stretch")
    st.caption("Mouse: rotate | Wheel: zoom")

    if result.words:
        with st.expander(f"📋 {len(result.words)} plotted words"):
            st.dataframe(
                [
                    {"word": a.word, "level": a.level, "count": a.count, **dict(a.dimensions)}
                    for a in result.words.values()
                ],
                width="stretch",
            )

# Guided word selection
with tab2:
    st.write("Build a sentence by clicking words. Only known words can be added.")
    st.text_input("Draft", value=" ".join(st.session_state.draft), disabled=True)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("➕ Add draft", disabled=not st.session_state.draft):
            error = add_sentence(" ".join(st.session_state.draft))
            if error:
                show_error(error)
            else:
                st.session_state.draft = []
                st.rerun()
    with c2:
        if st.button("↩️ Reset draft"):
            st.session_state.draft = []
            st.rerun()

    for level, words in vocabulary_by_layer().items():
        with st.expander(f"Level {level}: {ABSTRACTION_LAYERS[level - 1].name}"):
            word_buttons(words, f"layer{level}")

    for name, words in vocabulary_by_dimension().items():
        with st.expander(f"Dimension: {name}"):
            word_buttons(words, f"dim:{name}")

    with st.expander("Connector words"):
        word_buttons(sorted(CONNECTOR_WORDS), "connector", cols=6)
