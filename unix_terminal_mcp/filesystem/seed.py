"""Initial layout of the course filesystem."""

SEED_IMAGE: dict = {
    "type": "directory",
    "children": {
        "home": {
            "type": "directory",
            "children": {
                "user": {
                    "type": "directory",
                    "children": {
                        "documents": {
                            "type": "directory",
                            "children": {
                                "notes.txt": {
                                    "type": "file",
                                    "content": "Welcome to Unix for the Rest of Us!\nThis is a sample text file.",
                                },
                                "project-plan.txt": {
                                    "type": "file",
                                    "content": "Project: Learn Unix\nStatus: In Progress\nDeadline: This week!",
                                },
                            },
                        },
                        "downloads": {
                            "type": "directory",
                            "children": {
                                "report.pdf": {
                                    "type": "file",
                                    "content": "[PDF content - binary file]",
                                },
                            },
                        },
                        "scripts": {
                            "type": "directory",
                            "children": {
                                "backup.sh": {
                                    "type": "file",
                                    "content": '#!/bin/bash\necho "Running backup..."\ncp -r ~/documents ~/backup',
                                },
                                "hello.sh": {
                                    "type": "file",
                                    "content": '#!/bin/bash\necho "Hello, World!"',
                                },
                            },
                        },
                        ".bashrc": {
                            "type": "file",
                            "content": '# ~/.bashrc\nexport PATH=$PATH:/usr/local/bin\nalias ll="ls -la"',
                        },
                        ".profile": {
                            "type": "file",
                            "content": "# ~/.profile\n# User specific environment",
                        },
                    },
                },
            },
        },
        "etc": {
            "type": "directory",
            "children": {
                "hosts": {
                    "type": "file",
                    "content": "127.0.0.1   localhost\n::1         localhost",
                },
                "passwd": {
                    "type": "file",
                    "content": "root:x:0:0:root:/root:/bin/bash\nuser:x:1000:1000:user:/home/user:/bin/bash",
                },
            },
        },
        "var": {
            "type": "directory",
            "children": {
                "log": {
                    "type": "directory",
                    "children": {
                        "syslog": {
                            "type": "file",
                            "content": (
                                "Jan 29 10:00:01 server systemd[1]: Started Unix Course.\n"
                                "Jan 29 10:00:02 server nginx[1234]: Server started on port 80"
                            ),
                        },
                        "auth.log": {
                            "type": "file",
                            "content": (
                                "Jan 29 09:55:00 server sshd[5678]: Accepted password for user\n"
                                "Jan 29 09:55:01 server sshd[5678]: pam_unix(sshd:session): session opened"
                            ),
                        },
                    },
                },
            },
        },
        "tmp": {
            "type": "directory",
            "children": {},
        },
    },
}
