"""
Journal Template Checker - Streamlit Web Application

A simple web interface for checking article compliance with the journal template.
"""

import streamlit as st

from template_checker.extractor import DocumentExtractor
from template_checker.models import Severity
from template_checker.output_generator import OutputGenerator
from template_checker.validator import DocumentValidator, summarize


# Page configuration
st.set_page_config(
    page_title="Проверка статьи",
    page_icon="📄",
    layout="centered"
)

# Custom CSS for cleaner appearance
st.markdown("""
<style>
    .stButton > button {
        width: 100%;
    }
</style>
""", unsafe_allow_html=True)

SEVERITY_ICONS = {
    Severity.SUCCESS: "✅",
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❌",
}


def reset():
    """Forget the current report and show the upload form again."""
    for key in ("results", "content", "file_name"):
        st.session_state.pop(key, None)
    st.session_state["uploader_key"] = st.session_state.get("uploader_key", 0) + 1


def show_results():
    """Render summary counters and the grouped check list."""
    results = st.session_state["results"]
    summary = summarize(results)

    st.success(f"✅ Проверка завершена: {st.session_state['file_name']}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Всего проверок", summary["total_checks"])
    with col2:
        st.metric("Пройдено", summary["passed_checks"])
    with col3:
        st.metric("Соответствие", f"{summary['percentage']}%")

    if summary["all_passed"]:
        st.info("Документ полностью соответствует требованиям")
    else:
        st.warning(f"Обнаружено несоответствий: {summary['failed_checks']}")

    for group in results:
        st.subheader(f"{group.category} ({group.passed_count}/{group.total_count})")
        for check in group.checks:
            icon = SEVERITY_ICONS[check.severity]
            st.markdown(f"{icon} **{check.name}**  \n{check.message}")
            if check.details and not check.passed:
                st.caption(check.details)

    st.divider()

    json_output = OutputGenerator.generate_json_output(
        document_path=st.session_state["file_name"],
        content=st.session_state["content"],
        validation_results=results
    )
    st.download_button(
        label="📥 Скачать отчет (JSON)",
        data=OutputGenerator.to_json(json_output),
        file_name=OutputGenerator.get_default_output_path(st.session_state["file_name"]),
        mime="application/json",
        use_container_width=True
    )

    st.button("Проверить другой документ", on_click=reset, type="primary")


# Header
st.title("📄 Проверка технического состояния статьи")
st.markdown(
    "Автоматическая проверка соответствия документа техническим требованиям журнала."
)

st.divider()

if "results" in st.session_state:
    show_results()

else:
    st.markdown(
        """
**Система проверяет:**
- Объем документа (8-12 страниц)
- Наличие и правильность оформления УДК
- Форматирование заголовка и информации об авторе
- Наличие аннотаций на армянском, английском и русском языках
- Ключевые слова
- Разделы статьи и оформление списка литературы
        """
    )

    # File upload
    uploaded_file = st.file_uploader(
        "Загрузите статью",
        type=["docx", "pdf", "txt"],
        help="Перетащите файл .docx или нажмите, чтобы выбрать",
        key=f"uploader_{st.session_state.get('uploader_key', 0)}"
    )

    if uploaded_file is not None:
        st.info(f"📎 **Файл:** {uploaded_file.name} ({uploaded_file.size / 1024:.1f} KB)")

        if st.button("🔍 Проверить документ", type="primary", use_container_width=True):
            try:
                with st.spinner("Обработка документа... Пожалуйста, подождите"):
                    content = DocumentExtractor().extract_bytes(
                        uploaded_file.getvalue(), uploaded_file.name
                    )
                    results = DocumentValidator().validate(content)

                st.session_state["results"] = results
                st.session_state["content"] = content
                st.session_state["file_name"] = uploaded_file.name
                st.rerun()

            except (ValueError, RuntimeError):
                st.error("❌ Ошибка обработки")
                st.caption("Не удалось обработать документ. Убедитесь, что файл в формате .docx")

    else:
        st.markdown(
            """
            <div style="text-align: center; padding: 40px; color: #888;">
                <p>👆 Загрузите файл .docx, чтобы начать</p>
            </div>
            """,
            unsafe_allow_html=True
        )

# Footer
st.divider()
st.caption(
    "Проверка статьи | "
    "Соответствие шаблону журнала: УДК, заголовки, аннотации, ключевые слова, литература"
)
