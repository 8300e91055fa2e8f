"""
Views layer - UI presentation components.

Pages import their view class directly (views.poll_view.PollView etc.).
"""
