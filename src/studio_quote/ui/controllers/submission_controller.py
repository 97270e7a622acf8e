from __future__ import annotations

from tkinter import messagebox

from studio_quote.core.services.submission import submit_order
from studio_quote.ui.components.confirmation_dialog import ConfirmationDialog


class SubmissionController:
    """
    Runs the confirm -> sending -> done flow for either service form.
    The simulated delay goes through ``after`` so the window keeps repainting.
    """

    def __init__(self, window) -> None:
        self.w = window

    def request_submit(self, form_frame) -> None:
        session = form_frame.session
        if session.submitting:
            return
        if not session.can_submit:
            messagebox.showwarning("依頼を送信", "必須項目を入力してください。")
            return
        ConfirmationDialog(
            self.w,
            title="送信内容の確認",
            message="この内容で依頼を送信しますか？",
            on_confirm=lambda: self._start(form_frame),
        )

    def _start(self, form_frame) -> None:
        session = form_frame.session
        payload = session.begin_submit()
        if payload is None:
            return
        form_frame.sync_submit_button()
        delay_ms = int(session.config.submit_delay * 1000)
        self.w.after(delay_ms, lambda: self._finish(form_frame, payload))

    def _finish(self, form_frame, payload: dict) -> None:
        form_frame.session.finish_submit(submit_order(payload, delay=0))
        form_frame.refresh()
        messagebox.showinfo("送信完了", "ご依頼ありがとうございます。内容を確認のうえご連絡いたします。")
