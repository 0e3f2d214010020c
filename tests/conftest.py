"""Test configuration."""

import pytest

JSTACK_DUMP = """\
2024-03-11 10:15:42
Full thread dump OpenJDK 64-Bit Server VM (17.0.9+9 mixed mode, sharing):

Threads class SMR info:
_java_thread_list=0x00007f3c8c0b2b40, length=3, elements={
0x00007f3c8c00a800, 0x00007f3c8c01f800, 0x00007f3c8c0b1000
}

"main" #1 prio=5 os_prio=0 cpu=152.31ms elapsed=12.04s tid=0x00007f3c8c00a800 nid=0x1c03 runnable  [0x00007f3c93ffe000]
   java.lang.Thread.State: RUNNABLE
\tat java.io.FileInputStream.readBytes(java.base@17.0.9/Native Method)
\tat com.example.App.main(App.java:12)

"Reference Handler" #2 daemon prio=10 os_prio=0 cpu=0.12ms elapsed=12.01s tid=0x00007f3c8c01f800 nid=0x1c0a waiting on condition  [0x00007f3c7a2fe000]
   java.lang.Thread.State: RUNNABLE
\tat java.lang.ref.Reference.waitForReferencePendingList(java.base@17.0.9/Native Method)

"pool-1-thread-1" #14 prio=5 os_prio=0 cpu=3.40ms elapsed=11.80s tid=0x00007f3c8c0b1000 nid=0x1c1f waiting on condition  [0x00007f3c78dfd000]
   java.lang.Thread.State: WAITING (parking)
\tat jdk.internal.misc.Unsafe.park(java.base@17.0.9/Native Method)
\t- parking to wait for  <0x00000000e1a4c2b8> (a java.util.concurrent.locks.AbstractQueuedSynchronizer$ConditionObject)

"VM Thread" os_prio=0 cpu=2.18ms elapsed=12.02s tid=0x00007f3c8c0a3000 nid=0x1c09 runnable

JNI global refs: 14, weak refs: 0
"""


@pytest.fixture
def jstack_dump():
    """A small jstack dump with banner text and four threads."""
    return JSTACK_DUMP


@pytest.fixture
def two_thread_dump():
    """Two threads, one with a stack frame."""
    return '"main" tid=0x1 nid=0x2 runnable\n  at A.b()\n"GC-thread" tid=0x3 nid=0x4 waiting\n'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep THREAD_GREP_* variables and stray .env files out of tests."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("THREAD_GREP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
